import click

from exemplar._version import __version__


@click.group(invoke_without_command=True)
@click.option('--verbose', '-v', is_flag=True, help='log debug messages too')
@click.version_option(__version__, prog_name='exemplar')
@click.pass_context
def exemplar(ctx, verbose):
    '''Minimal example programs, one per sub-command.

    \b
    example:
        exemplar greet --name=Ada
        exemplar scan
        exemplar fetch
        exemplar file
        exemplar walkdir some/dir
        exemplar run greet --name=Ada       # run in a child process, DEBUG=1
        exemplar list                       # list the examples
    '''
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    if not ctx.invoked_subcommand:
        click.echo(ctx.get_help())
