from .commands import exemplar

exemplar(prog_name="exemplar")
