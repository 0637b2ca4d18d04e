import click


@click.command()
@click.pass_context
def help(ctx):
    '''print this help msg.'''
    click.echo(ctx.parent.get_help()) # ctx.parent -> exemplar level
