"""Minimal example programs, runnable alone or through one command line tool.
"""

from ._version import __version__

__all__ = ["__version__"]
