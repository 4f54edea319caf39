"""
Main duopane application class.
"""
import curses
import logging

from ..constants import KEY_RESIZE
from ..filemanager.bookmarks import BookmarkTable
from ..filemanager.cursor_cache import CursorCache
from ..filemanager.operations import select_file_commands
from ..filemanager.panel import Panel
from ..filemanager.rendering import draw_screen, draw_status
from ..utils import init_colors
from .bootstrap import configure_terminal, suspended_terminal
from .config import AppConfig, save_config
from .dispatcher import InputDispatcher

LOGGER = logging.getLogger(__name__)

APP_VERSION = '0.3.0'


class DuoPaneApp:
    """Two panels, the key dispatcher and the curses main loop."""

    def __init__(self, stdscr, config, config_path=None, commands=None):
        self.stdscr = stdscr
        self.config_path = config_path
        self.cursor_cache = CursorCache(config.cursor_cache)
        self.bookmarks = BookmarkTable(config.bookmarks)
        self.commands = commands if commands is not None else select_file_commands()

        left = Panel(config.left_path, self.cursor_cache.get(config.left_path))
        right = Panel(config.right_path, self.cursor_cache.get(config.right_path))
        self.dispatcher = InputDispatcher(
            left, right, self.commands, self.cursor_cache, self.bookmarks,
            suspend=lambda: suspended_terminal(self.stdscr),
            progress=self.redraw_status,
        )
        # Startup listing errors are shown on the first frame.
        self.status = ' '.join(str(p.error) for p in (left, right) if p.error)

    def setup_terminal(self):
        configure_terminal(self.stdscr)
        init_colors()

    def redraw_all(self):
        """Draw a full frame, then forget the status text."""
        self.stdscr.erase()
        d = self.dispatcher
        page = draw_screen(self.stdscr, d.left, d.right, d.active, self.status)
        self.status = ''
        self.stdscr.refresh()
        d.page_size = page
        return page

    def redraw_status(self, text):
        draw_status(self.stdscr, text)
        self.stdscr.refresh()

    def read_key(self):
        """Block until one key arrives; None when the read was interrupted."""
        try:
            return self.stdscr.get_wch()
        except curses.error:
            return None

    def run(self):
        """Run the input loop until quit, then persist state."""
        self.setup_terminal()
        self.redraw_all()
        while True:
            key = self.read_key()
            if key is None or key == KEY_RESIZE:
                self.redraw_all()
                continue
            if not self.dispatcher.handle_key(key):
                break
            self.status = self.dispatcher.status
            self.redraw_all()
        self.persist_config()

    def current_config(self):
        d = self.dispatcher
        return AppConfig(
            left_path=d.left.path,
            right_path=d.right.path,
            cursor_cache=self.cursor_cache.as_dict(),
            bookmarks=self.bookmarks.as_dict(),
        )

    def persist_config(self):
        """Write panel paths, cursor cache and bookmarks to the config file."""
        try:
            path = save_config(self.current_config(), self.config_path)
        except (OSError, ValueError):
            LOGGER.warning('failed to save config', exc_info=True)
            return None
        LOGGER.debug('saved config to %s', path)
        return path
