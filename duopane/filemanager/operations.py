"""
File system operations for the file panels.

Copy, move and delete are delegated to the platform's own utilities through
a CommandRunner; this module only decides which commands to run and refuses
operations that touch the filesystem root.
"""
import logging
import ntpath
import os
import posixpath

from ..core.errors import OperationError, SafetyRejection
from ..core.process import CommandRunner

LOGGER = logging.getLogger(__name__)


class FileCommands:
    """Platform file commands: copy, move, delete, drives and shell.

    Root guards are plain string checks made with the platform's path
    module after normalization; they never query the filesystem.
    """

    pathmod = os.path
    windows = False

    def __init__(self, runner=None):
        self.runner = runner if runner is not None else CommandRunner(windows=self.windows)

    def is_root(self, path):
        """Return True when path normalizes to a filesystem root."""
        return self.pathmod.normpath(path).endswith(self.pathmod.sep)

    def _dir_with_sep(self, path):
        return self.pathmod.normpath(path) + self.pathmod.sep

    def copy(self, src, dst_dir):
        """Copy a file or folder into dst_dir."""
        if self.is_root(dst_dir):
            raise SafetyRejection(f'Copy to root folder {self.pathmod.normpath(dst_dir)} not allowed for safety')
        self._copy(src, self._dir_with_sep(dst_dir))

    def move(self, src, dst_dir):
        """Move a file or folder into dst_dir."""
        if self.is_root(dst_dir):
            raise SafetyRejection(f'Move to root folder {self.pathmod.normpath(dst_dir)} not allowed for safety')
        if self.is_root(self.pathmod.dirname(self.pathmod.normpath(src))):
            raise SafetyRejection(f'Moving {src} from root folder not allowed for safety')
        dst_dir = self._dir_with_sep(dst_dir)
        try:
            self._move(src, dst_dir)
            return
        except OperationError:
            # Hidden files and cross-volume moves trip up some move
            # utilities; retry the long way round and report only that
            # attempt's error.
            LOGGER.debug('move of %s failed, falling back to copy+delete', src, exc_info=True)
        self.copy(src, dst_dir)
        self.delete(src)

    def delete(self, path):
        """Delete a file or folder, recursively."""
        path = self.pathmod.normpath(path)
        if self.is_root(self.pathmod.dirname(path)):
            raise SafetyRejection(f'Deleting {path} from root folder not allowed for safety')
        self._delete(path)

    def list_drives(self):
        """Return the set of available drive letters (upper-case)."""
        return set()

    def volume_root(self, path):
        """Return the root of the volume holding path."""
        return self.pathmod.splitdrive(path)[0] + self.pathmod.sep

    def spawn_interactive_shell(self, cwd):
        self.runner.spawn_interactive_shell(cwd)

    def _copy(self, src, dst_dir):
        raise NotImplementedError

    def _move(self, src, dst_dir):
        raise NotImplementedError

    def _delete(self, path):
        raise NotImplementedError


class PosixFileCommands(FileCommands):
    """cp/mv/rm based commands."""

    pathmod = posixpath
    windows = False

    def _copy(self, src, dst_dir):
        self.runner.execute('cp', '-R', src, dst_dir)

    def _move(self, src, dst_dir):
        self.runner.execute('mv', '-f', src, dst_dir)

    def _delete(self, path):
        self.runner.execute('rm', '-rf', path)


class WindowsFileCommands(FileCommands):
    """cmd.exe based commands (xcopy, move, del, rd)."""

    pathmod = ntpath
    windows = True
    # xcopy asks whether the target names a file or a directory.
    XCOPY_ANSWER = 'f\n'

    def _copy(self, src, dst_dir):
        # copy skips hidden and system files, xcopy /H does not.
        target = ntpath.join(dst_dir, ntpath.basename(ntpath.normpath(src)))
        self.runner.execute(
            'xcopy', '/Q', '/I', '/K', '/H', '/Y', '/R', '/S', '/E', src, target,
            answer=self.XCOPY_ANSWER,
        )

    def _move(self, src, dst_dir):
        self.runner.execute('move', '/Y', src, dst_dir)

    def _delete(self, path):
        error = None
        try:
            self.runner.execute('del', '/Q', '/A', path)
        except OperationError as exc:
            error = exc
        # del only removes files; rd then removes the directory tree. When
        # del already removed the target, rd fails with "not found".
        try:
            self.runner.execute('rd', '/S', '/Q', path)
        except OperationError:
            LOGGER.debug('ignoring rd failure for %s', path, exc_info=True)
        if error is not None:
            raise error

    def list_drives(self):
        try:
            import ctypes
            bitmask = ctypes.windll.kernel32.GetLogicalDrives()
        except (ImportError, AttributeError, OSError):
            LOGGER.debug('drive enumeration failed', exc_info=True)
            return set()
        drives = set()
        for offset in range(26):
            if bitmask & (1 << offset):
                drives.add(chr(ord('A') + offset))
        return drives


def select_file_commands(runner=None, os_name=None):
    """Pick the FileCommands implementation for the running platform."""
    if (os_name or os.name) == 'nt':
        return WindowsFileCommands(runner)
    return PosixFileCommands(runner)
