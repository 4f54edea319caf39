"""
Entry point for duopane.
"""
import argparse
import curses
import dataclasses
import locale
import logging
import os

from .core.app import APP_VERSION, DuoPaneApp
from .core.config import default_config_path, load_config

# Ensure UTF-8
try:
    locale.setlocale(locale.LC_ALL, '')
except locale.Error:
    pass


def configure_logging(environ=None):
    """Enable debug logging when DUOPANE_DEBUG is set (to DUOPANE_LOG if given)."""
    environ = os.environ if environ is None else environ
    if not environ.get('DUOPANE_DEBUG'):
        return
    logging.basicConfig(
        level=logging.DEBUG,
        filename=environ.get('DUOPANE_LOG') or None,
        format='[%(levelname)s] %(name)s: %(message)s',
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog='duopane',
        description='A simple and small terminal-based two-pane file manager.',
    )
    parser.add_argument('left', nargs='?', help='left panel path')
    parser.add_argument('right', nargs='?', help='right panel path')
    parser.add_argument(
        '-c', '--config', default=str(default_config_path()),
        help='config file (default: %(default)s)',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {APP_VERSION}')
    return parser


def resolve_config(args):
    """Load the config and apply command line paths over it.

    Paths on the command line win, then the saved ones, then the current
    directory (left) and the home directory (right).
    """
    config = load_config(args.config)
    left = args.left or config.left_path or os.getcwd()
    right = args.right or config.right_path or os.path.expanduser('~')
    return dataclasses.replace(
        config,
        left_path=os.path.abspath(left),
        right_path=os.path.abspath(right),
    )


def run(argv=None):
    """Run duopane and return process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging()
    config = resolve_config(args)

    def main(stdscr):
        DuoPaneApp(stdscr, config, config_path=args.config).run()

    try:
        curses.wrapper(main)
        return 0
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        # Top-level crash guard is intentionally broad to restore terminal state.
        try:
            curses.endwin()
        except curses.error:
            pass
        print(f'\nError: {e}')
        import traceback
        traceback.print_exc()
        return 1


def main_cli():
    """Console script entrypoint."""
    return run()


if __name__ == '__main__':
    raise SystemExit(main_cli())
