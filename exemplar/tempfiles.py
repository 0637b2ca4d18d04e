"""Manage a single file in a temporary location.

A `TempFile` is created with a unique name as soon as it is
constructed, and deleted when it is cleaned. Used as a context manager,
the file is cleaned on exit whichever way the block is left, so the
removal is effectively scheduled the moment creation succeeds.

"""

import logging
import os
import tempfile
import typing

from . import errors
from ._repr import make_repr
from .error_tools import convert_os_errors

if typing.TYPE_CHECKING:
    from typing import Optional, Text

log = logging.getLogger("exemplar.tempfiles")


class TempFile(object):
    """A uniquely named file that is removed when cleaned.

    Examples:
        Create, write, and close a file in the current directory::

            >>> with TempFile(prefix="example", temp_dir=".") as temp_file:
            ...     temp_file.write(b"Example Content")
            ...     temp_file.close()

    """

    def __init__(
        self,
        prefix="tmp",  # type: Text
        temp_dir=None,  # type: Optional[Text]
        ignore_clean_errors=True,  # type: bool
    ):
        # type: (...) -> None
        """Create a new `TempFile` instance.

        Arguments:
            prefix (str): The start of the file name.
            temp_dir (str, optional): An OS path to the directory that
                will contain the file (leave as `None` to use the OS
                temp location).
            ignore_clean_errors (bool): If `True` (the default), any
                errors removing the file are logged. If `False`, they
                will be raised.

        Raises:
            exemplar.errors.CreateFailed: if the file can't be created.

        """
        self.prefix = prefix
        self._temp_dir = temp_dir
        self._ignore_clean_errors = ignore_clean_errors
        self._cleaned = False

        with convert_os_errors(
            "create", temp_dir or tempfile.gettempdir(), default=errors.CreateFailed, table={}
        ):
            fd, self.name = tempfile.mkstemp(prefix=prefix, dir=temp_dir)
        self._file = os.fdopen(fd, "wb")

    def __repr__(self):
        # type: () -> Text
        return make_repr(
            self.__class__.__name__,
            prefix=(self.prefix, "tmp"),
            temp_dir=(self._temp_dir, None),
        )

    def __str__(self):
        # type: () -> Text
        return "<tempfile '{}'>".format(self.name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.clean()

    @property
    def closed(self):
        # type: () -> bool
        return self._file.closed

    def write(self, data):
        # type: (bytes) -> int
        """Write ``data`` to the file.

        Raises:
            exemplar.errors.WriteFailed: if the write fails.

        """
        with convert_os_errors("write", self.name, default=errors.WriteFailed, table={}):
            return self._file.write(data)

    def close(self):
        # type: () -> None
        """Flush and close the file handle. The file itself remains.

        Raises:
            exemplar.errors.CloseFailed: if the buffered data could not
                be written out, or the handle could not be closed.

        """
        with convert_os_errors("close", self.name, default=errors.CloseFailed, table={}):
            self._file.close()

    def clean(self):
        # type: () -> None
        """Close the handle if still open, and delete the file."""
        if self._cleaned:
            return

        if not self._file.closed:
            try:
                self.close()
            except errors.CloseFailed as error:
                log.error("%s", error)

        try:
            with convert_os_errors("remove", self.name, default=errors.RemoveFailed, table={}):
                os.remove(self.name)
        except errors.RemoveFailed as error:
            if not self._ignore_clean_errors:
                raise
            log.error("%s", error)
        self._cleaned = True
