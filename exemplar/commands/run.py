import click

from exemplar import errors, runner
from exemplar.log import setup_command_logging


@click.command(context_settings=dict(ignore_unknown_options=True, allow_interspersed_args=False))
@click.argument('name')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.option('--no-debug', is_flag=True, help='do not set DEBUG=1 for the example')
@click.pass_context
def run(ctx, name, args, no_debug):
    '''run an example in a child process and print its output.

    \b
    example:
        run greet --name=Ada
        run --no-debug walkdir .
    '''
    setup_command_logging(ctx)
    try:
        result = runner.run_example(name, args, debug=not no_debug)
    except errors.UnknownExample as error:
        raise click.BadParameter(str(error), param_hint='NAME')
    click.echo(result.output, nl=False)
    ctx.exit(result.exit_code)
