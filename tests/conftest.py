import logging

import pytest


@pytest.fixture(autouse=True)
def reset_exemplar_logging():
    """Drop handlers installed by commands, so they don't outlive the
    CliRunner streams they were bound to."""
    yield
    log = logging.getLogger("exemplar")
    for handler in list(log.handlers):
        if getattr(handler, "_exemplar", False):
            log.removeHandler(handler)
