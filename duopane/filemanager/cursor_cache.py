"""
Remembered cursor entry per directory.
"""
import os
import sys


class CursorCache:
    """Map of directory path -> name of the entry last under the cursor.

    Keys go through ``os.path.normcase``, and are also lower-cased on macOS,
    so lookups are case-insensitive where the default filesystem is.
    """

    def __init__(self, mapping=None):
        self._names = {}
        for path, name in (mapping or {}).items():
            if isinstance(path, str) and isinstance(name, str):
                self.set(path, name)

    @staticmethod
    def _key(path):
        key = os.path.normcase(path)
        if sys.platform == 'darwin':
            key = key.lower()
        return key

    def get(self, path):
        """Return the remembered name for path, or '' when unknown."""
        return self._names.get(self._key(path), '')

    def set(self, path, name):
        self._names[self._key(path)] = name

    def as_dict(self):
        return dict(self._names)

    def __len__(self):
        return len(self._names)
