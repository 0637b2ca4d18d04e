"""Values the examples take from their environment.
"""

import os
import re

DEFAULT_NAME = "Your Name"

_is_integer = re.compile(r'[+-]?[0-9]+').fullmatch


def parse_int(text):
    """Parse a base-10 integer, returning ``0`` if ``text`` isn't one.

    Only an optional sign followed by digits is accepted; whitespace
    and underscores are not.

    >>> parse_int("12")
    12
    >>> parse_int(" 12")
    0

    """
    if text and _is_integer(text):
        return int(text)
    return 0


def is_debug(environ=None):
    """Check the ``DEBUG`` environment variable.

    Arguments:
        environ (dict, optional): Mapping to read from, defaults to
            `os.environ`.

    Returns:
        bool: `True` if ``DEBUG`` holds an integer greater than zero.

    """
    if environ is None:
        environ = os.environ
    return parse_int(environ.get("DEBUG", "")) > 0


def resolve_name(name=None, words=()):
    """Pick the name to greet.

    An explicit ``name`` wins, then ``words`` joined with spaces, then
    `DEFAULT_NAME`.
    """
    if name is not None:
        return name
    if words:
        return " ".join(words)
    return DEFAULT_NAME
