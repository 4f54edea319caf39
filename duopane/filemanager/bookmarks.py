"""
Digit-keyed directory bookmarks.
"""
import os

BOOKMARK_KEYS = '0123456789'


def is_bookmark_key(key):
    return isinstance(key, str) and len(key) == 1 and key in BOOKMARK_KEYS


class BookmarkTable:
    """Bookmark slots "0".."9" mapped to absolute paths."""

    def __init__(self, mapping=None):
        self._slots = {}
        for key, path in (mapping or {}).items():
            key = str(key)
            if is_bookmark_key(key) and isinstance(path, str) and path:
                self._slots[key] = path

    def get(self, key):
        """Return the path bookmarked at key, or None when unset."""
        return self._slots.get(key)

    def set(self, key, path):
        """Assign bookmark slot to provided path."""
        if not is_bookmark_key(key):
            raise ValueError(f'Invalid bookmark slot: {key!r}')
        self._slots[key] = os.path.abspath(path)

    def as_dict(self):
        return dict(sorted(self._slots.items()))

    def __len__(self):
        return len(self._slots)
