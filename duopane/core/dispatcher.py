"""Keystroke state machine driving the two panels."""

import contextlib
import enum
import logging
import os

from ..constants import (
    HOME_KEY,
    KEYMAP,
    PROMPT_BOOKMARK,
    PROMPT_BOOKMARK_OR_DRIVE,
    PROMPT_BOOKMARK_SET,
    VOLUME_ROOT_KEY,
)
from ..filemanager.bookmarks import is_bookmark_key
from ..utils import key_char, normalize_key_code
from .errors import DuoPaneError

try:
    import pyperclip
except ImportError:  # pragma: no cover - optional clipboard support
    pyperclip = None

LOGGER = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


class PendingCommand(str, enum.Enum):
    """Multi-keystroke command waiting for its second key."""

    NONE = "none"
    BOOKMARK_JUMP = "bookmark_jump"
    BOOKMARK_SET = "bookmark_set"
    DELETE_CONFIRM = "delete_confirm"


def key_matches(action, key):
    """Return True when key is bound to action in KEYMAP."""
    code = normalize_key_code(key)
    char = key_char(key)
    for binding in KEYMAP[action]:
        if isinstance(binding, str):
            if char == binding:
                return True
        elif code == binding:
            return True
    return False


class InputDispatcher:
    """Own both panels, the caches and the pending-command state.

    ``suspend`` is a context manager factory used around the interactive
    shell; ``progress`` receives status text while a batch runs.
    """

    def __init__(self, left, right, commands, cursor_cache, bookmarks,
                 suspend=None, progress=None):
        self.left = left
        self.right = right
        self.active = left
        self.other = right
        self.commands = commands
        self.cursor_cache = cursor_cache
        self.bookmarks = bookmarks
        self.suspend = suspend or contextlib.nullcontext
        self.progress = progress or (lambda _text: None)
        self.pending = PendingCommand.NONE
        self.pending_sources = []
        self.status = ''
        self.page_size = DEFAULT_PAGE_SIZE

    # --- Entry point ---

    def handle_key(self, key):
        """Process one keystroke; return False when the loop should end.

        ``status`` afterwards holds only what this keystroke reported.
        """
        self.status = ''
        pending = self.pending
        if pending is not PendingCommand.NONE:
            self.pending = PendingCommand.NONE
            if pending is PendingCommand.BOOKMARK_JUMP:
                self._resolve_bookmark_jump(key)
            elif pending is PendingCommand.BOOKMARK_SET:
                self._resolve_bookmark_set(key)
            elif pending is PendingCommand.DELETE_CONFIRM:
                self._resolve_delete(key)
            return True
        return self._handle_idle_key(key)

    def _handle_idle_key(self, key):
        panel = self.active
        if key_matches('quit', key):
            return False
        if key_matches('switch_panel', key):
            self.switch_panels()
        elif key_matches('up', key):
            panel.move_cursor(-1)
        elif key_matches('down', key):
            panel.move_cursor(1)
        elif key_matches('page_up', key):
            panel.move_cursor(-self.page_size)
        elif key_matches('page_down', key):
            panel.move_cursor(self.page_size)
        elif key_matches('home', key):
            panel.cursor_home()
        elif key_matches('end', key):
            panel.cursor_end()
        elif key_matches('parent', key):
            self.go_to_parent()
        elif key_matches('enter', key):
            self.enter_directory()
        elif key_matches('toggle_select', key):
            panel.toggle_select_cursor()
        elif key_matches('select_all', key):
            panel.toggle_select_all()
        elif key_matches('refresh', key):
            self.refresh_both()
        elif key_matches('shell', key):
            self.shell_escape()
        elif key_matches('bookmark_jump', key):
            self.pending = PendingCommand.BOOKMARK_JUMP
            if self.commands.list_drives():
                self.status = PROMPT_BOOKMARK_OR_DRIVE
            else:
                self.status = PROMPT_BOOKMARK
        elif key_matches('bookmark_set', key):
            self.pending = PendingCommand.BOOKMARK_SET
            self.status = PROMPT_BOOKMARK_SET
        elif key_matches('copy', key):
            self.copy()
        elif key_matches('move', key):
            self.move()
        elif key_matches('delete', key):
            self.request_delete()
        elif key_matches('copy_path', key):
            self.copy_path_to_clipboard()
        return True

    # --- Status helpers ---

    def _add_error(self, exc):
        LOGGER.debug('operation failed: %s', exc)
        self.status = f'{self.status} {exc}'.strip()

    def _navigate(self, panel, path):
        try:
            panel.reset(path, self.cursor_cache.get(path))
        except DuoPaneError as exc:
            self._add_error(exc)

    def _refresh(self, panel):
        try:
            panel.refresh()
        except DuoPaneError as exc:
            self._add_error(exc)

    # --- Navigation ---

    def switch_panels(self):
        self.active, self.other = self.other, self.active

    def go_to_parent(self):
        panel = self.active
        parent = os.path.dirname(panel.path)
        if parent == panel.path:
            return
        name = panel.cursor_name()
        if name:
            self.cursor_cache.set(panel.path, name)
        self.cursor_cache.set(parent, os.path.basename(panel.path))
        self._navigate(panel, parent)

    def enter_directory(self):
        panel = self.active
        entry = panel.cursor_entry()
        if entry is None or not entry.is_dir:
            return
        self.cursor_cache.set(panel.path, entry.name)
        self._navigate(panel, panel.full_path(entry))

    def refresh_both(self):
        self._refresh(self.active)
        self._refresh(self.other)

    def shell_escape(self):
        try:
            with self.suspend():
                self.commands.spawn_interactive_shell(self.active.path)
        except DuoPaneError as exc:
            self.status = str(exc)
        self.refresh_both()

    # --- Bookmarks ---

    def _resolve_bookmark_jump(self, key):
        char = key_char(key)
        if char is None:
            return
        target = None
        if char.upper() in self.commands.list_drives():
            target = f'{char.upper()}:\\'
        elif is_bookmark_key(char):
            target = self.bookmarks.get(char)
        elif char == VOLUME_ROOT_KEY:
            target = self.commands.volume_root(self.active.path)
        elif char == HOME_KEY:
            target = os.path.expanduser('~')
        if target:
            self._navigate(self.active, target)

    def _resolve_bookmark_set(self, key):
        char = key_char(key)
        if is_bookmark_key(char):
            self.bookmarks.set(char, self.active.path)

    # --- File operations ---

    def _run_batch(self, verb, sources, operation):
        total = len(sources)
        for i, src in enumerate(sources, 1):
            self.progress(f'{verb} file {i}/{total}: {src}')
            try:
                operation(src)
            except DuoPaneError as exc:
                self._add_error(exc)

    def copy(self):
        if self.active.path == self.other.path:
            return
        sources = self.active.operation_sources()
        dst = self.other.path
        self._run_batch('Copying', sources, lambda src: self.commands.copy(src, dst))
        self._refresh(self.other)
        if self.active.path == self.other.path:
            self._refresh(self.active)

    def move(self):
        if self.active.path == self.other.path:
            return
        sources = self.active.operation_sources()
        dst = self.other.path
        self._run_batch('Moving', sources, lambda src: self.commands.move(src, dst))
        self._refresh(self.active)
        self._refresh(self.other)

    def request_delete(self):
        sources = self.active.operation_sources()
        if not sources:
            return
        self.pending = PendingCommand.DELETE_CONFIRM
        self.pending_sources = sources
        self.status = (
            f'Press D again to confirm deleting {len(sources)} files '
            f'({" ".join(sources)})'
        )

    def _resolve_delete(self, key):
        sources, self.pending_sources = self.pending_sources, []
        if not key_matches('delete', key):
            return
        self._run_batch('Deleting', sources, self.commands.delete)
        self._refresh(self.active)
        if self.active.path == self.other.path:
            self._refresh(self.other)

    # --- Clipboard ---

    def copy_path_to_clipboard(self):
        entry = self.active.cursor_entry()
        if entry is None:
            return
        path = self.active.full_path(entry)
        if pyperclip is None:
            self.status = 'Clipboard support requires pyperclip'
            return
        try:
            pyperclip.copy(path)
        except pyperclip.PyperclipException as exc:
            self.status = f'Clipboard unavailable: {exc}'
            return
        self.status = f'Copied path: {path}'
