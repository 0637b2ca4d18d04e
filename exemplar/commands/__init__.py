from exemplar.registry import EXAMPLES

from .exemplar import exemplar
from .help import help
from .list import list
from .run import run

for command in EXAMPLES.values():
    exemplar.add_command(command)

exemplar.add_command(help)
exemplar.add_command(list)
exemplar.add_command(run)

__all__ = ["exemplar"]
