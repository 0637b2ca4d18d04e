"""The registered example commands, in the order they are listed.
"""

from collections import OrderedDict

from .examples.fetch import fetch
from .examples.file import file
from .examples.greet import greet
from .examples.scan import scan
from .examples.walkdir import walkdir

EXAMPLES = OrderedDict(
    (command.name, command)
    for command in (greet, scan, fetch, file, walkdir)
)


def get_example(name):
    """Get the click command for an example, or `None`."""
    return EXAMPLES.get(name)
