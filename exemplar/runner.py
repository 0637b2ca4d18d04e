"""Run an example as a program of its own.

Each example runs in a child Python process, exactly as it would from
the command line, with stdout and stderr captured together. ``DEBUG=1``
is set in the child environment unless asked otherwise.
"""

import logging
import os
import subprocess
import sys

from collections import namedtuple

from . import errors
from .registry import EXAMPLES

log = logging.getLogger("exemplar.runner")

RunResult = namedtuple('RunResult', 'name, args, exit_code, output')
"""type: the outcome of `run_example`."""


def example_argv(name, args=()):
    """Get the command line that runs example ``name``.

    Raises:
        exemplar.errors.UnknownExample: if no such example is registered.

    """
    if name not in EXAMPLES:
        raise errors.UnknownExample(name)
    return [sys.executable, "-m", "exemplar.examples." + name] + [str(arg) for arg in args]


def run_example(name, args=(), env=None, input=None, debug=True):
    """Run one example and wait for it to finish.

    Arguments:
        name (str): A name registered in `exemplar.registry.EXAMPLES`.
        args (list): Command line arguments for the example.
        env (dict, optional): Extra environment variables for the child.
        input (str, optional): Text fed to the child's stdin. If `None`,
            the child inherits this process's stdin.
        debug (bool): Set ``DEBUG=1`` in the child environment.

    Returns:
        RunResult: the exit code and the merged stdout / stderr text.

    """
    argv = example_argv(name, args)
    child_env = dict(os.environ)
    if debug:
        child_env["DEBUG"] = "1"
    if env:
        child_env.update(env)

    log.debug("running %s", " ".join(argv))
    completed = subprocess.run(
        argv,
        env=child_env,
        input=input,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        universal_newlines=True,
    )
    log.debug("%s exited with %d", name, completed.returncode)
    return RunResult(name, tuple(args), completed.returncode, completed.stdout)
