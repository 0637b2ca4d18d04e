import click

from exemplar.registry import EXAMPLES


@click.command()
def list():
    '''list the examples.'''
    width = max(len(name) for name in EXAMPLES)
    for name, command in EXAMPLES.items():
        click.echo('%-*s  %s' % (width, name, command.get_short_help_str()))
