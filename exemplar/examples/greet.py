"""
Say hello to someone.

Usage:

    python -m exemplar.examples.greet [--name NAME] [WORDS]...

example:

    python -m exemplar.examples.greet --name=Ada
    DEBUG=1 python -m exemplar.examples.greet Ada Lovelace

"""

import click

from exemplar.env import is_debug, resolve_name
from exemplar.log import setup_command_logging


@click.command()
@click.option('--name', default=None, help='A name to say hello to.  [default: Your Name]')
@click.argument('words', nargs=-1)
@click.pass_context
def greet(ctx, name, words):
    """print a greeting.

    \b
    example:
        greet --name=Ada
        greet Ada Lovelace
    """
    setup_command_logging(ctx)
    if is_debug():
        click.echo("Debug mode is on")
    click.echo("Hello, {}!".format(resolve_name(name, words)))


if __name__ == "__main__":
    greet()
