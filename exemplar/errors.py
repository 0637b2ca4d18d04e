"""

Defines the Exception classes thrown by the example programs.

Failures from the network, the filesystem and standard input are
translated in to one of the following exceptions before they are
reported.

All Exception classes are derived from :class:`~exemplar.errors.ExampleError`
which may be used as a catch-all exception.

"""

__all__ = [
    'CloseFailed',
    'CreateFailed',
    'DirectoryExpected',
    'ExampleError',
    'FileOperationFailed',
    'InputFailed',
    'OperationFailed',
    'PermissionDenied',
    'RemoveFailed',
    'ResourceError',
    'ResourceInvalid',
    'ResourceNotFound',
    'TransportFailed',
    'UnknownExample',
    'WriteFailed',
]


class ExampleError(Exception):
    """Base exception class for the exemplar package."""

    default_message = "Unspecified error"

    def __init__(self, msg=None):
        self._msg = msg or self.default_message
        super(ExampleError, self).__init__()

    def __str__(self):
        """The error message."""
        msg = self._msg.format(**self.__dict__)
        return msg

    def __repr__(self):
        msg = self._msg.format(**self.__dict__)
        return "{}({!r})".format(self.__class__.__name__, msg)


class UnknownExample(ExampleError):
    """Raised when asked to run an example that is not registered."""

    default_message = "no example named '{name}'"

    def __init__(self, name, msg=None):
        self.name = name
        super(UnknownExample, self).__init__(msg=msg)


class OperationFailed(ExampleError):
    """Base exception class for errors associated with a specific operation."""

    default_message = "operation failed, {details}"

    def __init__(self, path=None, exc=None, msg=None):
        self.path = path
        self.exc = exc
        self.details = '' if exc is None else str(exc)
        self.errno = getattr(exc, "errno", None)
        super(OperationFailed, self).__init__(msg=msg)


class TransportFailed(OperationFailed):
    """The network could not be reached, or the response could not be read."""

    default_message = "request to {path} failed: {details}"


class InputFailed(OperationFailed):
    """Reading from standard input failed."""

    default_message = "unable to read input: {details}"

    def __init__(self, exc=None, msg=None):
        super(InputFailed, self).__init__(path='<stdin>', exc=exc, msg=msg)


class FileOperationFailed(OperationFailed):
    """Base class for failures on a single file."""

    default_message = "operation on '{path}' failed: {details}"


class CreateFailed(FileOperationFailed):
    default_message = "unable to create file in '{path}': {details}"


class WriteFailed(FileOperationFailed):
    default_message = "unable to write '{path}': {details}"


class CloseFailed(FileOperationFailed):
    default_message = "unable to close '{path}': {details}"


class RemoveFailed(FileOperationFailed):
    default_message = "unable to remove '{path}': {details}"


class ResourceError(ExampleError):
    """Base exception class for error associated with a specific resource."""

    default_message = "failed on path {path}"

    def __init__(self, path, exc=None, msg=None):
        self.path = path
        self.exc = exc
        self.details = '' if exc is None else str(exc)
        super(ResourceError, self).__init__(msg=msg)


class ResourceNotFound(ResourceError):
    """Exception raised when a required resource is not found."""

    default_message = "resource '{path}' not found"


class PermissionDenied(ResourceError):
    """Permissions error."""

    default_message = "permission denied on '{path}'"


class ResourceInvalid(ResourceError):
    """Exception raised when a resource is the wrong type."""

    default_message = "resource '{path}' is invalid for this operation"


class DirectoryExpected(ResourceInvalid):
    """Exception raises when a directory was expected."""

    default_message = "path '{path}' should be a directory"
