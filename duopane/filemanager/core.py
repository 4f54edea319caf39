"""
Core data structures and helpers for the file panels.
"""
import os
import stat
import time
import unicodedata
from dataclasses import dataclass

from ..core.errors import ListError


def _cell_width(ch):
    """Return terminal cell width for a single character."""
    if not ch:
        return 0
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ('W', 'F'):
        return 2
    return 1


def _fit_text_to_cells(text, max_cells):
    """Clip/pad text so rendered width does not exceed max_cells."""
    if max_cells <= 0:
        return ''
    out = []
    used = 0
    for ch in text:
        w = _cell_width(ch)
        if used + w > max_cells:
            break
        out.append(ch)
        used += w
    if used < max_cells:
        out.append(' ' * (max_cells - used))
    return ''.join(out)


def format_size(size):
    """Human readable byte count (1.5K, 12M, 3.0G)."""
    for unit, scale in (('T', 1 << 40), ('G', 1 << 30), ('M', 1 << 20), ('K', 1 << 10)):
        if size >= scale:
            return f'{size / scale:.1f}{unit}'
    return f'{size}B'


def format_mtime(mtime, long=False):
    fmt = '%a, %d %b %Y %H:%M:%S' if long else '%d %b %Y %H:%M:%S'
    return time.strftime(fmt, time.localtime(mtime))


@dataclass(frozen=True)
class DirectoryEntry:
    """Snapshot of one directory child taken at listing time."""

    name: str
    is_dir: bool
    size: int = 0
    mtime: float = 0.0
    mode: int = 0

    @property
    def permissions(self):
        """Summarized permission string, e.g. ``drwxr-xr-x``."""
        kind = 'd' if self.is_dir else '-'
        return kind + stat.filemode(self.mode)[1:]

    @property
    def display_name(self):
        if self.is_dir:
            return self.name + os.sep
        return self.name


def entry_sort_key(entry):
    """Directories first, then case-insensitive name."""
    return (not entry.is_dir, entry.name.lower())


def list_directory(path):
    """Return the sorted children of ``path``; raise ListError when unreadable."""
    try:
        names = os.listdir(path)
    except OSError as exc:
        raise ListError(path, exc.strerror or str(exc)) from exc

    entries = []
    for name in names:
        full_path = os.path.join(path, name)
        try:
            st = os.stat(full_path)
        except OSError:
            # Dangling symlinks still show up, described by the link itself.
            try:
                st = os.lstat(full_path)
            except OSError:
                continue
        entries.append(DirectoryEntry(
            name=name,
            is_dir=stat.S_ISDIR(st.st_mode),
            size=st.st_size,
            mtime=st.st_mtime,
            mode=st.st_mode,
        ))
    entries.sort(key=entry_sort_key)
    return entries
