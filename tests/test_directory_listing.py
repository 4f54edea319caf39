import os
import stat
import tempfile
import unittest

from _support import build_tree

from duopane.core.errors import ListError
from duopane.filemanager.core import (
    DirectoryEntry,
    _fit_text_to_cells,
    entry_sort_key,
    format_size,
    list_directory,
)


class ListDirectoryTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.base = self.tmp.name

    def test_directories_first_then_case_insensitive_names(self):
        build_tree(self.base, ['b.txt', 'A.txt', 'c.txt', 'zeta/', 'Alpha/', 'beta/', '.hidden'])
        entries = list_directory(self.base)
        dirs = [e for e in entries if e.is_dir]
        files = [e for e in entries if not e.is_dir]
        self.assertEqual(entries, dirs + files)
        self.assertEqual([e.name for e in dirs], ['Alpha', 'beta', 'zeta'])
        self.assertEqual([e.name for e in files], ['.hidden', 'A.txt', 'b.txt', 'c.txt'])
        lowered = [e.name.lower() for e in files]
        self.assertEqual(lowered, sorted(lowered))

    def test_entries_capture_size_and_mode(self):
        build_tree(self.base, ['file.txt'])
        entry = list_directory(self.base)[0]
        self.assertEqual(entry.name, 'file.txt')
        self.assertFalse(entry.is_dir)
        self.assertEqual(entry.size, len('file.txt'))
        self.assertTrue(stat.S_ISREG(entry.mode))
        self.assertGreater(entry.mtime, 0)

    def test_empty_directory(self):
        self.assertEqual(list_directory(self.base), [])

    def test_missing_directory_raises_list_error(self):
        missing = os.path.join(self.base, 'nope')
        with self.assertRaises(ListError) as ctx:
            list_directory(missing)
        self.assertEqual(ctx.exception.path, missing)
        self.assertIn(missing, str(ctx.exception))

    @unittest.skipUnless(hasattr(os, 'symlink') and os.name != 'nt', 'symlinks needed')
    def test_dangling_symlink_is_listed_as_file(self):
        os.symlink(os.path.join(self.base, 'gone'), os.path.join(self.base, 'link'))
        entries = list_directory(self.base)
        self.assertEqual([e.name for e in entries], ['link'])
        self.assertFalse(entries[0].is_dir)


class DirectoryEntryTests(unittest.TestCase):
    def test_permissions_summary(self):
        entry = DirectoryEntry('d', True, mode=stat.S_IFDIR | 0o755)
        self.assertEqual(entry.permissions, 'drwxr-xr-x')
        entry = DirectoryEntry('f', False, mode=stat.S_IFREG | 0o640)
        self.assertEqual(entry.permissions, '-rw-r-----')

    def test_display_name_marks_directories(self):
        self.assertEqual(DirectoryEntry('d', True).display_name, 'd' + os.sep)
        self.assertEqual(DirectoryEntry('f', False).display_name, 'f')

    def test_entries_are_immutable(self):
        entry = DirectoryEntry('f', False)
        with self.assertRaises(AttributeError):
            entry.name = 'g'

    def test_sort_key(self):
        entries = [DirectoryEntry('b', False), DirectoryEntry('Z', True), DirectoryEntry('a', True)]
        self.assertEqual([e.name for e in sorted(entries, key=entry_sort_key)], ['a', 'Z', 'b'])


class FormattingTests(unittest.TestCase):
    def test_format_size(self):
        self.assertEqual(format_size(0), '0B')
        self.assertEqual(format_size(1023), '1023B')
        self.assertEqual(format_size(1536), '1.5K')
        self.assertEqual(format_size(5 * 1024 * 1024), '5.0M')
        self.assertEqual(format_size(3 << 30), '3.0G')

    def test_fit_text_pads_and_clips_wide_chars(self):
        self.assertEqual(_fit_text_to_cells('ab', 4), 'ab  ')
        self.assertEqual(_fit_text_to_cells('abcdef', 3), 'abc')
        self.assertEqual(_fit_text_to_cells('中文', 3), '中 ')
        self.assertEqual(_fit_text_to_cells('x', 0), '')


if __name__ == '__main__':
    unittest.main()
