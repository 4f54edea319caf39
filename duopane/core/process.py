"""Run external commands through the platform default shell."""

import logging
import os
import shlex
import subprocess

from .errors import OperationError, ShellLaunchError

LOGGER = logging.getLogger(__name__)


class CommandRunner:
    """Execute one command line at a time and capture its output.

    Commands go through the user's shell (``$SHELL -c`` or ``%COMSPEC% /C``)
    so shell built-ins such as ``del``/``move`` on Windows are available.
    stderr is merged into stdout.
    """

    def __init__(self, windows=None, environ=None):
        self.windows = (os.name == 'nt') if windows is None else bool(windows)
        self.environ = os.environ if environ is None else environ

    def shell(self):
        """Return the default shell executable for this platform."""
        if self.windows:
            return self.environ.get('COMSPEC') or 'cmd.exe'
        return self.environ.get('SHELL') or '/bin/sh'

    def command_line(self, command, *args):
        """Join command and args into one properly quoted shell line."""
        tokens = [command, *args]
        if self.windows:
            return subprocess.list2cmdline(tokens)
        return ' '.join(shlex.quote(token) for token in tokens)

    def _shell_argv(self, line):
        if self.windows:
            # A plain string is used verbatim as the command line on Windows,
            # which keeps cmd.exe parsing the arguments itself.
            return f'"{self.shell()}" /C {line}'
        return [self.shell(), '-c', line]

    def execute(self, command, *args, answer=None):
        """Run command and return its output lines.

        ``answer`` is written to the child's stdin, for commands that ask a
        question before acting. A non-zero exit raises OperationError with
        the captured output embedded in the message.
        """
        line = self.command_line(command, *args)
        LOGGER.debug('running: %s', line)
        # Without an answer the child must not read from the curses terminal.
        stdin_kwargs = {'input': answer} if answer is not None else {'stdin': subprocess.DEVNULL}
        try:
            proc = subprocess.run(
                self._shell_argv(line),
                **stdin_kwargs,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors='replace',
                check=False,
            )
        except OSError as exc:
            raise OperationError(f'{command}: {exc}') from exc

        output = proc.stdout.splitlines() if proc.stdout else []
        if proc.returncode != 0:
            LOGGER.debug('%s exited with %s', command, proc.returncode)
            message = f'{command}: exit status {proc.returncode}'
            if output:
                message += ': ' + '\n'.join(output)
            raise OperationError(message, output)
        return output

    def spawn_interactive_shell(self, cwd):
        """Hand the terminal to an interactive shell rooted at cwd and wait."""
        argv = [self.shell()] if self.windows else [self.shell(), '-i']
        LOGGER.debug('spawning shell %s in %s', argv[0], cwd)
        try:
            proc = subprocess.run(argv, cwd=cwd, check=False)
        except OSError as exc:
            raise ShellLaunchError(f'Cannot start shell {argv[0]}: {exc}') from exc
        if proc.returncode != 0:
            raise ShellLaunchError(f'<< Exited shell: exit status {proc.returncode}')
