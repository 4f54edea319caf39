"""Terminal bootstrap helpers for duopane startup and shell suspension."""

import contextlib
import curses


def configure_terminal(stdscr):
    """Apply core curses terminal setup: blocking reads, no echo, keypad."""
    try:
        curses.curs_set(0)
    except curses.error:
        # Some terminals cannot hide the cursor.
        pass
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    stdscr.nodelay(False)
    # Deliver a lone ESC without the default one second delay.
    set_escdelay = getattr(curses, 'set_escdelay', None)
    if callable(set_escdelay):
        set_escdelay(25)


@contextlib.contextmanager
def suspended_terminal(stdscr):
    """Give the terminal back to the shell for the duration of the block."""
    curses.def_prog_mode()
    curses.endwin()
    try:
        yield
    finally:
        curses.reset_prog_mode()
        stdscr.clear()
        stdscr.refresh()
