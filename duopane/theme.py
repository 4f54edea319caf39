"""Color roles for duopane panels and status line."""

import curses

from .constants import (
    C_BAR,
    C_BAR_INFO,
    C_CURSOR,
    C_CURSOR_DIR,
    C_PANEL,
    C_PANEL_DIR,
    C_SELECTED,
    C_SELECTED_CURSOR,
    C_STATUS,
    C_STATUS_MSG,
)

# Test doubles may expose only a subset of color constants.
for _name, _fallback in {
    "COLOR_BLACK": 0,
    "COLOR_RED": 1,
    "COLOR_GREEN": 2,
    "COLOR_YELLOW": 3,
    "COLOR_BLUE": 4,
    "COLOR_MAGENTA": 5,
    "COLOR_CYAN": 6,
    "COLOR_WHITE": 7,
}.items():
    if not hasattr(curses, _name):
        setattr(curses, _name, _fallback)

# -1 is the terminal's default color (curses.use_default_colors()).
DEFAULT = -1

ROLE_TO_PAIR_ID = {
    "panel": C_PANEL,
    "panel_dir": C_PANEL_DIR,
    "cursor": C_CURSOR,
    "cursor_dir": C_CURSOR_DIR,
    "selected": C_SELECTED,
    "selected_cursor": C_SELECTED_CURSOR,
    "bar": C_BAR,
    "bar_info": C_BAR_INFO,
    "status": C_STATUS,
    "status_message": C_STATUS_MSG,
}

PAIRS = {
    "panel": (DEFAULT, DEFAULT),
    "panel_dir": (curses.COLOR_YELLOW, DEFAULT),
    "cursor": (curses.COLOR_BLACK, curses.COLOR_GREEN),
    "cursor_dir": (curses.COLOR_BLUE, curses.COLOR_GREEN),
    "selected": (DEFAULT, curses.COLOR_BLUE),
    "selected_cursor": (curses.COLOR_BLACK, curses.COLOR_CYAN),
    "bar": (curses.COLOR_WHITE, curses.COLOR_RED),
    "bar_info": (curses.COLOR_YELLOW, curses.COLOR_RED),
    "status": (DEFAULT, DEFAULT),
    "status_message": (curses.COLOR_MAGENTA, DEFAULT),
}
