"""
Log every file and directory beneath a directory.

Usage:

    python -m exemplar.examples.walkdir [PATH]...

The arguments are joined with spaces, so a path containing spaces
doesn't need quoting. Any entry that can't be read stops the walk and
exits with status 1.

"""

import logging

import click

from exemplar import errors
from exemplar.env import is_debug
from exemplar.log import setup_command_logging
from exemplar.path import forcedir
from exemplar.walk import Walker

log = logging.getLogger("exemplar.examples.walkdir")


@click.command()
@click.argument('words', nargs=-1)
@click.pass_context
def walkdir(ctx, words):
    """log each entry in a directory tree.

    \b
    example:
        walkdir .
        walkdir My Documents
    """
    setup_command_logging(ctx)
    if is_debug():
        click.echo("Debug mode is on")

    root = " ".join(words) or "."
    log.info("walk %s", root)
    try:
        for entry in Walker().walk(root):
            name = forcedir(entry.name) if entry.is_dir else entry.name
            log.info("%s (%s)", name, entry.path)
    except errors.ResourceError as error:
        log.critical("%s", error)
        ctx.exit(1)


if __name__ == "__main__":
    walkdir()
