"""Machinery for walking a directory tree.

*Walking* a directory means visiting it, and then every file and
sub-directory beneath it. The walk is depth first and pre-order: a
directory is reported before anything it contains, and its contents
are reported before its next sibling.

"""

import os
import stat

from collections import namedtuple

from . import errors
from ._repr import make_repr
from .error_tools import convert_os_errors
from .path import combine


Entry = namedtuple('Entry', 'name, path, is_dir')
"""type: a single entry visited by a walk.

``path`` is relative to the root of the walk and separated with
forward slashes. The root itself is reported as ``Entry('.', '.', ...)``.
"""


class Walker(object):
    """A walker object recursively visits entries under a root directory.

    Arguments:
        ignore_errors (bool, optional): If `True`, any errors reading
            a directory will be ignored, otherwise exceptions will be
            raised.
        on_error (callable, optional): If ``ignore_errors`` is `False`,
            then this callable will be invoked for a path and the exception
            object. It should return `True` to ignore the error, or `False`
            to re-raise it.

    Siblings are visited in order of name. Symlinks to directories are
    reported but not followed.

    """

    def __init__(self, ignore_errors=False, on_error=None):
        self.ignore_errors = ignore_errors
        if on_error:
            if ignore_errors:
                raise ValueError(
                    'on_error is invalid when ignore_errors==True'
                )
        else:
            on_error = (
                self._ignore_errors
                if ignore_errors
                else self._raise_errors
            )
        if not callable(on_error):
            raise TypeError('on_error must be callable')
        self.on_error = on_error

    @classmethod
    def _ignore_errors(cls, path, error):
        """Default on_error callback."""
        return True

    @classmethod
    def _raise_errors(cls, path, error):
        """Callback to re-raise per-entry errors."""
        return False

    def __repr__(self):
        return make_repr(
            self.__class__.__name__,
            ignore_errors=(self.ignore_errors, False),
            on_error=(self.on_error, self._raise_errors),
        )

    def _stat(self, root):
        """Get the root entry, or `None` if an ignored error occurred."""
        try:
            with convert_os_errors('stat', root):
                st = os.stat(root)
        except errors.ResourceError as error:
            if not self.on_error(root, error):
                raise
            return None
        return Entry('.', '.', stat.S_ISDIR(st.st_mode))

    def _scan(self, root, dir_path):
        """Get a list of `os.DirEntry` objects for a directory, by name.

        Arguments:
            root (str): The OS path the walk started from.
            dir_path (str): A directory path relative to ``root``.

        """
        if dir_path == '.':
            sys_path = root
        else:
            sys_path = os.path.join(root, *dir_path.split('/'))
        try:
            with convert_os_errors('scandir', dir_path):
                with os.scandir(sys_path) as scan:
                    return sorted(scan, key=lambda dir_entry: dir_entry.name)
        except errors.ResourceError as error:
            if not self.on_error(dir_path, error):
                raise
            return []

    def walk(self, root='.'):
        """Walk the directory tree under ``root``.

        Arguments:
            root (str, optional): An OS path to a directory.

        Returns:
            ~collections.Iterator: an iterator of `~exemplar.walk.Entry`
            instances, starting with the root.

        Raises:
            exemplar.errors.ResourceError: if an entry could not be read
                and ``on_error`` did not ignore it.

        Example:
            >>> walker = Walker()
            >>> for entry in walker.walk('docs'):
            ...     print(entry.path)

        """
        root_entry = self._stat(root)
        if root_entry is None:
            return
        yield root_entry
        if not root_entry.is_dir:
            return

        # No recursion!
        stack = [('.', iter(self._scan(root, '.')))]
        push = stack.append
        while stack:
            dir_path, dir_entries = stack[-1]
            try:
                dir_entry = next(dir_entries)
            except StopIteration:
                del stack[-1]
                continue
            path = combine(dir_path, dir_entry.name)
            try:
                with convert_os_errors('stat', path):
                    is_dir = dir_entry.is_dir(follow_symlinks=False)
            except errors.ResourceError as error:
                if not self.on_error(path, error):
                    raise
                continue
            yield Entry(dir_entry.name, path, is_dir)
            if is_dir:
                push((path, iter(self._scan(root, path))))
