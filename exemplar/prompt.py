"""Read a single line of input.
"""

import sys

from . import errors


def open_stdin():
    """Get `sys.stdin`, set to replace bytes it can't decode.

    A line is taken as it arrives; bytes that aren't valid in the
    stream's encoding become U+FFFD rather than a read failure.
    """
    stdin = sys.stdin
    stdin.reconfigure(errors="replace")
    return stdin


def read_line(stream):
    """Read one line from ``stream``, without its line terminator.

    Arguments:
        stream (io.TextIOBase): A text stream, typically from
            `open_stdin`.

    Returns:
        str: the line read, or ``''`` at the end of the stream.

    Raises:
        exemplar.errors.InputFailed: if reading from the stream fails.

    """
    try:
        line = stream.readline()
    except OSError as error:
        raise errors.InputFailed(exc=error) from error
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
