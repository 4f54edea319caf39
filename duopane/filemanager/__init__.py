from .core import DirectoryEntry, list_directory
from .panel import Panel
from .cursor_cache import CursorCache
from .bookmarks import BookmarkTable
from .operations import FileCommands, PosixFileCommands, WindowsFileCommands, select_file_commands

__all__ = [
    'DirectoryEntry', 'list_directory', 'Panel', 'CursorCache', 'BookmarkTable',
    'FileCommands', 'PosixFileCommands', 'WindowsFileCommands', 'select_file_commands',
]
