import errno
import os
import shutil
import tempfile
import unittest
from unittest import mock

from exemplar import errors
from exemplar.tempfiles import TempFile


class TestTempFile(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp("testtempfile")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_create(self):
        t = TempFile(prefix="example", temp_dir=self.temp_dir)
        self.assertTrue(os.path.isfile(t.name))
        self.assertTrue(os.path.basename(t.name).startswith("example"))
        self.assertEqual(
            os.path.realpath(os.path.dirname(t.name)),
            os.path.realpath(self.temp_dir),
        )
        t.clean()

    def test_unique(self):
        with TempFile(temp_dir=self.temp_dir) as t1:
            with TempFile(temp_dir=self.temp_dir) as t2:
                self.assertNotEqual(t1.name, t2.name)

    def test_repr(self):
        with TempFile(prefix="example", temp_dir=self.temp_dir) as t:
            self.assertEqual(
                repr(t), "TempFile(prefix='example', temp_dir={!r})".format(self.temp_dir)
            )
            self.assertIn(t.name, str(t))

    def test_write_close(self):
        with TempFile(temp_dir=self.temp_dir) as t:
            self.assertEqual(t.write(b"Example Content"), 15)
            t.close()
            self.assertTrue(t.closed)
            with open(t.name, "rb") as f:
                self.assertEqual(f.read(), b"Example Content")

    def test_clean(self):
        t = TempFile(temp_dir=self.temp_dir)
        name = t.name
        t.clean()
        self.assertFalse(os.path.exists(name))
        self.assertTrue(t.closed)
        t.clean()

    def test_removed_on_error(self):
        with self.assertRaises(RuntimeError):
            with TempFile(temp_dir=self.temp_dir) as t:
                name = t.name
                raise RuntimeError("boom")
        self.assertFalse(os.path.exists(name))
        self.assertEqual(os.listdir(self.temp_dir), [])

    def test_create_failed(self):
        missing = os.path.join(self.temp_dir, "nope")
        with self.assertRaises(errors.CreateFailed) as ctx:
            TempFile(temp_dir=missing)
        self.assertEqual(ctx.exception.path, missing)

    def test_write_failed(self):
        with TempFile(temp_dir=self.temp_dir) as t:
            with mock.patch.object(t, "_file") as file_mock:
                file_mock.write.side_effect = OSError(errno.ENOSPC, "No space left on device")
                with self.assertRaises(errors.WriteFailed) as ctx:
                    t.write(b"data")
            self.assertEqual(ctx.exception.errno, errno.ENOSPC)
            t.close()

    def test_close_failed(self):
        with TempFile(temp_dir=self.temp_dir) as t:
            real_file = t._file
            with mock.patch.object(t, "_file") as file_mock:
                file_mock.close.side_effect = OSError(errno.EIO, "Input/output error")
                with self.assertRaises(errors.CloseFailed):
                    t.close()
            real_file.close()
        self.assertEqual(os.listdir(self.temp_dir), [])

    @mock.patch("os.remove", create=True)
    def test_clean_error(self, remove):
        remove.side_effect = OSError(errno.EBUSY, "Device or resource busy")
        t = TempFile(temp_dir=self.temp_dir, ignore_clean_errors=False)
        with self.assertRaises(errors.RemoveFailed):
            t.clean()

    @mock.patch("os.remove", create=True)
    def test_clean_error_ignored(self, remove):
        remove.side_effect = OSError(errno.EBUSY, "Device or resource busy")
        t = TempFile(temp_dir=self.temp_dir)
        with self.assertLogs("exemplar.tempfiles", level="ERROR") as logs:
            t.clean()
        self.assertEqual(len(logs.records), 1)
        self.assertIn("unable to remove", logs.output[0])
