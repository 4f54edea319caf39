import os
import subprocess
import tempfile
import unittest
from unittest import mock

from duopane.core.errors import OperationError, ShellLaunchError
from duopane.core.process import CommandRunner


class CommandLineTests(unittest.TestCase):
    def test_posix_quoting(self):
        runner = CommandRunner(windows=False, environ={})
        line = runner.command_line('cp', '-R', "/tmp/it's here", '/tmp/dst/')
        self.assertEqual(line, "cp -R '/tmp/it'\"'\"'s here' /tmp/dst/")

    def test_windows_quoting(self):
        runner = CommandRunner(windows=True, environ={})
        line = runner.command_line('del', '/Q', '/A', 'C:\\My Files\\a.txt')
        self.assertEqual(line, 'del /Q /A "C:\\My Files\\a.txt"')

    def test_shell_selection(self):
        self.assertEqual(CommandRunner(windows=False, environ={}).shell(), '/bin/sh')
        self.assertEqual(CommandRunner(windows=False, environ={'SHELL': '/bin/zsh'}).shell(), '/bin/zsh')
        self.assertEqual(CommandRunner(windows=True, environ={}).shell(), 'cmd.exe')
        self.assertEqual(
            CommandRunner(windows=True, environ={'COMSPEC': 'C:\\Windows\\cmd.exe'}).shell(),
            'C:\\Windows\\cmd.exe',
        )


class ExecuteWithMockedSubprocessTests(unittest.TestCase):
    def test_posix_runs_through_shell_dash_c(self):
        runner = CommandRunner(windows=False, environ={'SHELL': '/bin/bash'})
        done = subprocess.CompletedProcess([], 0, stdout='one\ntwo\n')
        with mock.patch('duopane.core.process.subprocess.run', return_value=done) as run:
            self.assertEqual(runner.execute('ls', '-a'), ['one', 'two'])
        argv = run.call_args.args[0]
        self.assertEqual(argv, ['/bin/bash', '-c', 'ls -a'])
        self.assertEqual(run.call_args.kwargs['stderr'], subprocess.STDOUT)
        self.assertIs(run.call_args.kwargs['stdin'], subprocess.DEVNULL)
        self.assertNotIn('input', run.call_args.kwargs)

    def test_windows_runs_through_comspec(self):
        runner = CommandRunner(windows=True, environ={'COMSPEC': 'C:\\Windows\\cmd.exe'})
        done = subprocess.CompletedProcess([], 0, stdout='')
        with mock.patch('duopane.core.process.subprocess.run', return_value=done) as run:
            runner.execute('xcopy', 'a', 'b', answer='f\n')
        self.assertEqual(run.call_args.args[0], '"C:\\Windows\\cmd.exe" /C xcopy a b')
        self.assertEqual(run.call_args.kwargs['input'], 'f\n')
        self.assertNotIn('stdin', run.call_args.kwargs)

    def test_non_zero_exit_embeds_output(self):
        runner = CommandRunner(windows=False, environ={})
        done = subprocess.CompletedProcess([], 2, stdout='cannot stat\nsecond line\n')
        with mock.patch('duopane.core.process.subprocess.run', return_value=done):
            with self.assertRaises(OperationError) as ctx:
                runner.execute('cp', 'a', 'b')
        self.assertEqual(str(ctx.exception), 'cp: exit status 2: cannot stat\nsecond line')
        self.assertEqual(ctx.exception.output, ['cannot stat', 'second line'])

    def test_launch_failure(self):
        runner = CommandRunner(windows=False, environ={})
        with mock.patch('duopane.core.process.subprocess.run', side_effect=FileNotFoundError('no shell')):
            with self.assertRaises(OperationError):
                runner.execute('cp', 'a', 'b')


@unittest.skipIf(os.name == 'nt', 'POSIX shell required')
class ExecuteIntegrationTests(unittest.TestCase):
    def setUp(self):
        self.runner = CommandRunner(windows=False, environ={'SHELL': '/bin/sh'})

    def test_captures_stdout_and_stderr(self):
        self.assertEqual(self.runner.execute('echo', 'hello world'), ['hello world'])
        with self.assertRaises(OperationError) as ctx:
            self.runner.execute('ls', '/definitely/not/here')
        self.assertIn('/definitely/not/here', str(ctx.exception))

    def test_answer_is_fed_to_stdin(self):
        self.assertEqual(self.runner.execute('cat', answer='f\n'), ['f'])

    def test_without_answer_stdin_is_empty(self):
        self.assertEqual(self.runner.execute('cat'), [])

    def test_arguments_are_not_shell_expanded(self):
        with tempfile.TemporaryDirectory() as tmp:
            name = os.path.join(tmp, 'a b;$HOME*')
            self.runner.execute('touch', name)
            self.assertTrue(os.path.exists(name))


class InteractiveShellTests(unittest.TestCase):
    def test_posix_shell_is_interactive_in_cwd(self):
        runner = CommandRunner(windows=False, environ={'SHELL': '/bin/zsh'})
        done = subprocess.CompletedProcess([], 0)
        with mock.patch('duopane.core.process.subprocess.run', return_value=done) as run:
            runner.spawn_interactive_shell('/home/me')
        self.assertEqual(run.call_args.args[0], ['/bin/zsh', '-i'])
        self.assertEqual(run.call_args.kwargs['cwd'], '/home/me')

    def test_abnormal_exit_raises(self):
        runner = CommandRunner(windows=True, environ={})
        done = subprocess.CompletedProcess([], 3)
        with mock.patch('duopane.core.process.subprocess.run', return_value=done) as run:
            with self.assertRaises(ShellLaunchError) as ctx:
                runner.spawn_interactive_shell('C:\\')
        self.assertEqual(run.call_args.args[0], ['cmd.exe'])
        self.assertIn('exit status 3', str(ctx.exception))

    def test_launch_failure_raises(self):
        runner = CommandRunner(windows=False, environ={})
        with mock.patch('duopane.core.process.subprocess.run', side_effect=OSError('boom')):
            with self.assertRaises(ShellLaunchError):
                runner.spawn_interactive_shell('/')


if __name__ == '__main__':
    unittest.main()
