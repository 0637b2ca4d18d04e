"""Version, used in module and setup.py.
"""
__version__ = "0.1.0"
