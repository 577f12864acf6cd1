"""rime-scheme — Design, inspect and convert Rime weasel/squirrel color schemes.

Usage: rime-scheme [global options] <command> [args]

Commands are auto-discovered from rime_scheme/commands/.
Each command module's docstring is its documentation.
Run `rime-scheme help <command>` for full module docs.

Preferences (platform, saved schemes, ...) live in a JSON file:
  --prefs PATH, else $RIME_SCHEME_PREFS, else
  ~/.config/rime-scheme/preferences.json.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, rime-scheme looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from rime_scheme import registry
from rime_scheme.core.color import InvalidColorFormat
from rime_scheme.core.env import load_env, platform_from_env
from rime_scheme.core.preferences import Preferences, PreferencesError
from rime_scheme.core.scheme import SchemeStore
from rime_scheme.core.types import PLATFORMS, UnknownNameError


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'rime_scheme.commands.{registry.module_for(name)}')


def _short_help(name: str, default: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else default


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  rime-scheme show scheme.yaml\n'
        '  rime-scheme export scheme.yaml --color-format argb\n'
        '  rime-scheme --platform squirrel export scheme.yaml\n'
        "  rime-scheme convert '#112233' --format rgba\n"
        '  rime-scheme import-color 0xff0000ff --format argb\n'
        '  rime-scheme preview scheme.yaml ./tmp/preview.png\n'
        '  rime-scheme save scheme.yaml && rime-scheme saved\n'
        "  rime-scheme set --from scheme.yaml label_color='#888' --save\n"
        '  rime-scheme prefs pageBackground dark\n'
        '  rime-scheme help export\n'
    )
    parser = argparse.ArgumentParser(
        prog='rime-scheme',
        description='Design, inspect and convert Rime weasel/squirrel color schemes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('--prefs', metavar='PATH', default=None, help='Preferences JSON file')
    parser.add_argument(
        '--platform',
        choices=PLATFORMS,
        default=None,
        help='Platform for this run only (default: stored preference)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.add_arguments(p)

    # `help` subcommand: prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<14} {_short_help(name, cmd.help)}')
        print('\nRun: rime-scheme help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'rime-scheme: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    try:
        store = SchemeStore(Preferences(args.prefs), platform_override=args.platform or platform_from_env())
        registry.get(args.command).execute(store, args)
    except (InvalidColorFormat, PreferencesError, UnknownNameError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
