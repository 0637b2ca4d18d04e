"""
Ask for a name on stdin and say hello.

Usage:

    python -m exemplar.examples.scan

example:

    echo Ada | python -m exemplar.examples.scan

"""

import logging

import click

from exemplar import errors
from exemplar.log import setup_command_logging
from exemplar.prompt import open_stdin, read_line

log = logging.getLogger("exemplar.examples.scan")


@click.command()
@click.pass_context
def scan(ctx):
    """read a name from stdin and greet it."""
    setup_command_logging(ctx)
    click.echo("Your Name: ", nl=False)
    try:
        name = read_line(open_stdin())
    except errors.InputFailed as error:
        log.error("%s", error)
        ctx.exit(1)
    click.echo("Hello {}".format(name))


if __name__ == "__main__":
    scan()
