"""
Create a temporary file in the current directory, write to it, and
remove it again.

Usage:

    python -m exemplar.examples.file

"""

import logging

import click

from exemplar import errors
from exemplar.log import setup_command_logging
from exemplar.tempfiles import TempFile

log = logging.getLogger("exemplar.examples.file")

PREFIX = "example"
CONTENT = b"Example Content"


@click.command()
@click.pass_context
def file(ctx):
    """create, write and remove a temporary file."""
    setup_command_logging(ctx)
    try:
        temp_file = TempFile(prefix=PREFIX, temp_dir=".")
    except errors.CreateFailed as error:
        log.error("%s", error)
        return

    with temp_file:
        log.info("Created temp file: %s", temp_file.name)
        try:
            temp_file.write(CONTENT)
            temp_file.close()
        except errors.FileOperationFailed as error:
            log.error("%s", error)
            return


if __name__ == "__main__":
    file()
