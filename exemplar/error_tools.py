"""Tools for translating OS errors in to exemplar errors.
"""

import errno

from . import errors


class _ConvertOSErrors(object):
    """Context manager to convert OSErrors in to exemplar errors."""

    ERRORS = {
        errno.ENOENT: errors.ResourceNotFound,
        errno.ESRCH: errors.ResourceNotFound,
        errno.ENOTDIR: errors.DirectoryExpected,
        errno.EINVAL: errors.ResourceInvalid,
        errno.EACCES: errors.PermissionDenied,
        errno.EPERM: errors.PermissionDenied,
    }

    def __init__(self, opname, path, default=errors.ResourceError, table=None):
        self._opname = opname
        self._path = path
        self._default = default
        self._table = self.ERRORS if table is None else table

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type and isinstance(exc_value, OSError):
            error_class = self._table.get(exc_value.errno, self._default)
            error = error_class(self._path, exc=exc_value)
            error.opname = self._opname
            raise error from exc_value


# Stops linter complaining about invalid class name
convert_os_errors = _ConvertOSErrors
