"""
Panel state: one side of the dual view bound to a directory.
"""
import os

from ..core.errors import ListError
from .core import list_directory


class Panel:
    """Directory listing plus cursor, viewport and selection state."""

    def __init__(self, path, cursor_name=''):
        self.path = path
        self.entries = []
        self.top = 0
        self.cursor = 0
        self.selected = set()
        self.error = None
        try:
            self.reset(path, cursor_name)
        except ListError as exc:
            self.error = exc

    def __repr__(self):
        return f'Panel({self.path!r}, cursor={self.cursor}, top={self.top})'

    def reset(self, path, cursor_name=''):
        """Bind the panel to ``path`` and place the cursor on ``cursor_name``.

        The panel state is always replaced; when the directory cannot be read
        the listing is left empty and the ListError is raised afterwards.
        """
        error = None
        try:
            entries = list_directory(path)
        except ListError as exc:
            entries = []
            error = exc
        self.path = path
        self.entries = entries
        self.top = 0
        self.cursor = 0
        self.selected = set()
        self.error = error
        if cursor_name:
            for i, entry in enumerate(self.entries):
                if entry.name == cursor_name:
                    self.cursor = i
                    break
        if error is not None:
            raise error

    def refresh(self):
        """Re-list the current path, keeping cursor and selection by name."""
        if not self.entries:
            self.reset(self.path)
            return

        top = self.top
        cursor_index = min(max(self.cursor, 0), len(self.entries) - 1)
        cursor_name = self.entries[cursor_index].name
        selected_names = {
            self.entries[i].name for i in self.selected
            if 0 <= i < len(self.entries)
        }

        # An unreadable directory leaves the panel empty and propagates.
        self.reset(self.path, cursor_name)
        if not self.entries:
            return
        self.top = top
        if self.entries[self.cursor].name != cursor_name:
            self.cursor = min(cursor_index, len(self.entries) - 1)
        self.selected = {
            i for i, entry in enumerate(self.entries)
            if entry.name in selected_names
        }

    def clamp_pos(self, height):
        """Limit cursor and viewport top to valid values for ``height`` rows."""
        height = max(1, height)
        count = len(self.entries)
        if self.cursor <= 0:
            self.cursor = 0
        elif self.cursor >= count:
            self.cursor = max(count - 1, 0)
        if self.cursor < self.top:
            self.top = self.cursor
        elif self.cursor >= self.top + height:
            self.top = self.cursor - height + 1
        if self.top >= count:
            self.top = count - 1
        if self.top < 0:
            self.top = 0

    # --- Cursor ---

    def cursor_entry(self):
        if 0 <= self.cursor < len(self.entries):
            return self.entries[self.cursor]
        return None

    def cursor_name(self):
        entry = self.cursor_entry()
        return entry.name if entry else ''

    def move_cursor(self, delta):
        self.cursor += delta

    def cursor_home(self):
        self.cursor = 0

    def cursor_end(self):
        if self.entries:
            self.cursor = len(self.entries) - 1

    # --- Selection ---

    def toggle_select_cursor(self):
        if not 0 <= self.cursor < len(self.entries):
            return
        if self.cursor in self.selected:
            self.selected.discard(self.cursor)
        else:
            self.selected.add(self.cursor)

    def toggle_select_all(self):
        if len(self.selected) == len(self.entries):
            self.selected = set()
        else:
            self.selected = set(range(len(self.entries)))

    def full_path(self, entry):
        return os.path.join(self.path, entry.name)

    def operation_sources(self):
        """Paths an operation applies to: the selection, else the cursor entry."""
        if self.selected:
            return [
                self.full_path(self.entries[i]) for i in sorted(self.selected)
                if 0 <= i < len(self.entries)
            ]
        entry = self.cursor_entry()
        if entry is None:
            return []
        return [self.full_path(entry)]
