"""
Tools to generate __repr__ strings

"""


def make_repr(class_name, *args, **kwargs):
    """
    Generate a repr string.

    Positional arguments are rendered as-is. Keyword arguments should be
    ``(value, default)`` tuples; a value equal to its default is left out
    of the output.

    >>> make_repr('TempFile', prefix=('example', 'tmp'), temp_dir=('.', None))
    "TempFile(prefix='example', temp_dir='.')"

    """
    arguments = [repr(arg) for arg in args]
    arguments.extend([
        "{}={!r}".format(name, value)
        for name, (value, default) in sorted(kwargs.items())
        if value != default
    ])
    return "{}({})".format(class_name, ', '.join(arguments))
