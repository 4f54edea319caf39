"""
Drawing helpers for panels and the status line.
"""
from ..constants import LEGEND, SB_V
from ..utils import fill, safe_addstr, theme_attr
from .core import _fit_text_to_cells, format_mtime, format_size


def entry_role(entry, is_cursor, is_selected, active):
    """Pick the color role of one listing row."""
    if active and is_selected and is_cursor:
        return 'selected_cursor'
    if is_selected:
        return 'selected'
    if active and is_cursor:
        return 'cursor_dir' if entry.is_dir else 'cursor'
    return 'panel_dir' if entry.is_dir else 'panel'


def format_entry_line(entry, width, is_selected=False):
    """Format one listing row for a panel width columns wide."""
    name = entry.display_name
    if is_selected:
        name = '*' + name
    if width > 50:
        name_w = width - 32
        return (
            f'{_fit_text_to_cells(name, name_w)} '
            f'{format_mtime(entry.mtime):<20.20} '
            f'{format_size(entry.size):>10.10}'
        )
    if width > 30:
        name_w = width - 11
        return f'{_fit_text_to_cells(name, name_w)} {format_size(entry.size):>10.10}'
    return _fit_text_to_cells(name, width)


def cursor_info(entry):
    """Permissions, date, size and name of the entry under the cursor."""
    return (
        f'{entry.permissions} {format_mtime(entry.mtime, long=True)} '
        f'{entry.size} {entry.name}'
    )


def draw_panel(stdscr, panel, x, width, height, active):
    """Draw panel rows plus its footer bar on row ``height``."""
    if width <= 0:
        return
    visible = max(0, min(len(panel.entries) - panel.top, height))
    for row in range(visible):
        idx = panel.top + row
        entry = panel.entries[idx]
        is_selected = idx in panel.selected
        role = entry_role(entry, idx == panel.cursor, is_selected, active)
        line = format_entry_line(entry, width, is_selected)
        safe_addstr(stdscr, row, x, _fit_text_to_cells(line, width), theme_attr(role))

    path_text = panel.path[:width]
    safe_addstr(stdscr, height, x, path_text, theme_attr('bar'))
    entry = panel.cursor_entry()
    info_x = x + len(path_text) + 1
    if entry is not None and info_x < x + width:
        info = cursor_info(entry)[:x + width - info_x]
        safe_addstr(stdscr, height, info_x, info, theme_attr('bar_info'))


def draw_separator(stdscr, x, height):
    attr = theme_attr('bar')
    for row in range(height):
        safe_addstr(stdscr, row, x, SB_V, attr)


def draw_status(stdscr, status):
    """Draw the bottom line: the status text, or the key legend."""
    h, w = stdscr.getmaxyx()
    fill(stdscr, h - 1, 0, w, 1, theme_attr('status'))
    if status:
        safe_addstr(stdscr, h - 1, 0, status, theme_attr('status_message'))
    else:
        safe_addstr(stdscr, h - 1, 0, LEGEND, theme_attr('status'))


def draw_screen(stdscr, left, right, active, status):
    """Clamp and draw both panels and the status line; return page height."""
    h, w = stdscr.getmaxyx()
    page = max(1, h - 2)
    left.clamp_pos(page)
    right.clamp_pos(page)
    mid = w // 2
    fill(stdscr, page, 0, w, 1, theme_attr('bar'))
    draw_separator(stdscr, mid, page)
    draw_panel(stdscr, left, 0, mid, page, left is active)
    draw_panel(stdscr, right, mid + 1, w - mid - 1, page, right is active)
    draw_status(stdscr, status)
    return page
