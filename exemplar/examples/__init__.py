"""

This directory contains the example command line apps.

They are intentionally very simple, each one acquires a single input,
performs a single operation and reports the outcome. None of them share
state with any other.

You typically run them from the command line with the following:

    python -m exemplar.examples.SCRIPT

or as a sub-command of the ``exemplar`` tool:

    exemplar SCRIPT

See the docstrings for details.

"""
