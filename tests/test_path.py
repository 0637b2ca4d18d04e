import unittest

from exemplar.path import combine, forcedir


class TestPathFunctions(unittest.TestCase):
    def test_combine(self):
        tests = [
            (".", "a.txt", "a.txt"),
            ("", "a.txt", "a.txt"),
            ("b", "c.txt", "b/c.txt"),
            ("b/", "c.txt", "b/c.txt"),
            ("foo/bar", "baz", "foo/bar/baz"),
        ]
        for path1, path2, result in tests:
            self.assertEqual(combine(path1, path2), result)

    def test_forcedir(self):
        self.assertEqual(forcedir("foo/bar"), "foo/bar/")
        self.assertEqual(forcedir("foo/bar/"), "foo/bar/")
        self.assertEqual(forcedir("."), "./")
