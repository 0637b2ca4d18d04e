"""Logging configuration shared by the example commands.

Log lines go to stderr, so that whatever an example prints stays
alone on stdout.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

log = logging.getLogger("exemplar")


def setup_logging(verbose=False):
    """Send ``exemplar`` log records to the current `sys.stderr`.

    Calling this again swaps out the handler installed by the previous
    call, so the handler always writes to the stream in place now.

    Arguments:
        verbose (bool): Log at ``DEBUG`` rather than ``INFO``.

    Returns:
        logging.Handler: the installed handler.

    """
    for handler in list(log.handlers):
        if getattr(handler, "_exemplar", False):
            log.removeHandler(handler)
    handler = logging.StreamHandler()
    handler._exemplar = True
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler


def setup_command_logging(ctx):
    """Configure logging for a command, honouring the group's ``--verbose``.
    """
    obj = ctx.find_object(dict) or {}
    return setup_logging(verbose=obj.get("verbose", False))
