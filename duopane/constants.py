"""Constants and key bindings for duopane."""

import curses

# Color pair ids, one per semantic role (see theme.py).
C_PANEL = 1
C_PANEL_DIR = 2
C_CURSOR = 3
C_CURSOR_DIR = 4
C_SELECTED = 5
C_SELECTED_CURSOR = 6
C_BAR = 7
C_BAR_INFO = 8
C_STATUS = 9
C_STATUS_MSG = 10

# Single-line separator.
SB_V = "│"

KEY_ESC = 27
KEY_TAB = 9
KEY_ENTER = 10
KEY_RETURN = 13
KEY_SPACE = 32

KEY_UP = getattr(curses, "KEY_UP", 259)
KEY_DOWN = getattr(curses, "KEY_DOWN", 258)
KEY_LEFT = getattr(curses, "KEY_LEFT", 260)
KEY_RIGHT = getattr(curses, "KEY_RIGHT", 261)
KEY_HOME = getattr(curses, "KEY_HOME", 262)
KEY_END = getattr(curses, "KEY_END", 360)
KEY_PPAGE = getattr(curses, "KEY_PPAGE", 339)
KEY_NPAGE = getattr(curses, "KEY_NPAGE", 338)
KEY_BACKSPACE = getattr(curses, "KEY_BACKSPACE", 263)
KEY_CURSES_ENTER = getattr(curses, "KEY_ENTER", 343)
KEY_F5 = getattr(curses, "KEY_F5", 269)
KEY_RESIZE = getattr(curses, "KEY_RESIZE", 410)

# Keys per dispatcher action; ints are key codes, strings literal characters.
KEYMAP = {
    "quit": (KEY_ESC, "q", "Q"),
    "switch_panel": (KEY_TAB,),
    "up": (KEY_UP, "k"),
    "down": (KEY_DOWN, "j"),
    "page_up": (KEY_PPAGE, "u"),
    "page_down": (KEY_NPAGE, "i"),
    "home": (KEY_HOME, "y"),
    "end": (KEY_END, "o"),
    "parent": (KEY_LEFT, "h", KEY_BACKSPACE, 127, 8),
    "enter": (KEY_RIGHT, "l", KEY_ENTER, KEY_RETURN, KEY_CURSES_ENTER),
    "toggle_select": (KEY_SPACE,),
    "select_all": ("a",),
    "refresh": (KEY_F5, "r"),
    "shell": (":",),
    "bookmark_jump": ("b",),
    "bookmark_set": ("B",),
    "copy": ("c",),
    "move": ("m",),
    "delete": ("D",),
    "copy_path": ("p",),
}

LEGEND = (
    "[ESC,q quit] [TAB switch] [SPC select] [ARROWS nav] [r refresh] "
    "[c Copy] [m Move] [DD Delete] [: Shell] [b/B Bookmarks]"
)

PROMPT_BOOKMARK_OR_DRIVE = "Press a drive letter or bookmark to cd to"
PROMPT_BOOKMARK = "Press a bookmark to cd to"
PROMPT_BOOKMARK_SET = "Press digit to bookmark to"

# Keys resolved while waiting for a bookmark.
VOLUME_ROOT_KEY = "/"
HOME_KEY = "~"
