import errno
import unittest

from exemplar import errors


class TestErrors(unittest.TestCase):
    def test_str(self):
        exc = OSError(errno.ENOSPC, "No space left on device")
        error = errors.WriteFailed("./example123", exc=exc)
        self.assertEqual(
            str(error),
            "unable to write './example123': [Errno 28] No space left on device",
        )
        self.assertEqual(error.errno, errno.ENOSPC)
        self.assertIs(error.exc, exc)

    def test_repr(self):
        error = errors.ResourceNotFound("foo")
        self.assertEqual(repr(error), "ResourceNotFound(\"resource 'foo' not found\")")

    def test_custom_message(self):
        error = errors.TransportFailed("http://example.com", msg="{path} is down")
        self.assertEqual(str(error), "http://example.com is down")

    def test_input_failed(self):
        error = errors.InputFailed(exc=OSError(errno.EIO, "Input/output error"))
        self.assertEqual(error.path, "<stdin>")
        self.assertIn("Input/output error", str(error))

    def test_unknown_example(self):
        self.assertEqual(str(errors.UnknownExample("nope")), "no example named 'nope'")

    def test_hierarchy(self):
        for error_class in (
            errors.CreateFailed,
            errors.WriteFailed,
            errors.CloseFailed,
            errors.RemoveFailed,
        ):
            self.assertTrue(issubclass(error_class, errors.FileOperationFailed))
        self.assertTrue(issubclass(errors.DirectoryExpected, errors.ResourceError))
        self.assertTrue(issubclass(errors.TransportFailed, errors.ExampleError))
