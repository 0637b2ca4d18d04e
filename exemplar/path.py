"""
Functions for building the relative paths reported by the walker.

Paths are always separated by forward slashes, whatever the host
platform uses, and are relative to the root of the walk. The root
itself is ``'.'``.

"""

__all__ = ["combine", "forcedir"]


def combine(path1, path2):
    """
    Join a relative directory path and a name.

    :param str path1: A directory path relative to the walk root.
    :param str path2: A name within that directory.
    :rtype: str

    >>> combine(".", "a.txt")
    'a.txt'
    >>> combine("foo/bar", "baz")
    'foo/bar/baz'

    """
    if not path1 or path1 == '.':
        return path2.lstrip('/')
    return "{}/{}".format(path1.rstrip('/'), path2.lstrip('/'))


def forcedir(path):
    """
    Ensure the path ends with a trailing forward slash

    >>> forcedir("foo/bar")
    'foo/bar/'
    >>> forcedir("foo/bar/")
    'foo/bar/'

    """
    if not path.endswith('/'):
        return path + '/'
    return path
