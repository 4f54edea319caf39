"""
Utility functions for duopane.
"""
import curses

from .theme import PAIRS, ROLE_TO_PAIR_ID


def init_colors():
    """Initialize curses color pairs for every semantic role."""
    curses.start_color()
    curses.use_default_colors()
    for role, pair_id in ROLE_TO_PAIR_ID.items():
        fg, bg = PAIRS[role]
        curses.init_pair(pair_id, fg, bg)


def theme_attr(role):
    """Return curses color attribute for a semantic role."""
    return curses.color_pair(ROLE_TO_PAIR_ID[role])


def safe_addstr(win, y, x, text, attr=0):
    """Write string safely, clipping to window bounds."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x >= w:
        return
    max_len = w - x
    # Writing the bottom-right cell scrolls some terminals.
    if y == h - 1:
        max_len -= 1
    if max_len <= 0:
        return
    try:
        win.addnstr(y, x, text, max_len, attr)
    except curses.error:
        pass


def fill(win, y, x, width, height, attr=0):
    """Paint a blank rectangle with attr."""
    for row in range(height):
        safe_addstr(win, y + row, x, ' ' * width, attr)


def normalize_key_code(key):
    """Normalize keys from get_wch()/getch() into comparable integer codes."""
    if isinstance(key, int):
        return key
    if not isinstance(key, str) or not key or len(key) != 1:
        return None
    if key in ('\n', '\r'):
        return 10
    if key == '\x1b':
        return 27
    if key == '\t':
        return 9
    if key == '\x7f':
        return 127
    if key == '\b':
        return 8
    return ord(key)


def key_char(key):
    """Return the printable character typed, or None for special keys."""
    if isinstance(key, str):
        return key if len(key) == 1 and key.isprintable() else None
    if isinstance(key, int) and 32 <= key < 127:
        return chr(key)
    return None
