"""
Fetch http://example.com and log the body.

Usage:

    python -m exemplar.examples.fetch

"""

import logging

import click

from exemplar import errors
from exemplar.fetch import EXAMPLE_URL, fetch as fetch_document
from exemplar.log import setup_command_logging

log = logging.getLogger("exemplar.examples.fetch")


@click.command()
@click.pass_context
def fetch(ctx):
    """GET http://example.com and log the response body."""
    setup_command_logging(ctx)
    log.info("fetch...")
    try:
        body = fetch_document(EXAMPLE_URL)
    except errors.TransportFailed as error:
        log.error("%s", error)
        return
    log.info("%s", body)


if __name__ == "__main__":
    fetch()
