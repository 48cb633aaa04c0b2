"""wcagcontrast — WCAG 2.0 luminance and contrast ratios from the command line.

Usage: wcagcontrast <command> COLOR... [--json]

Commands are auto-discovered from wcagcontrast/commands/.
Each command module's docstring is its documentation.
Run `wcagcontrast help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, wcagcontrast looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from wcagcontrast import registry
from wcagcontrast.core.color import Color, InvalidColorFormat
from wcagcontrast.core.env import get_precision, load_env
from wcagcontrast.core.report import format_json, format_text
from wcagcontrast.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'wcagcontrast.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  wcagcontrast ratio '#000000' '#ffffff'\n"
        "  wcagcontrast luminance '#336699' '#f0f0f0' --json\n"
        "  wcagcontrast matrix '#000000' '#777777' '#ffffff'\n"
        '  wcagcontrast help ratio\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  WCAGCONTRAST_PRECISION  decimal places in text output (default 2)\n'
    )
    parser = argparse.ArgumentParser(
        prog='wcagcontrast',
        description='WCAG 2.0 relative luminance and contrast ratio for sRGB colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command_name', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        cmd.add_arguments(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<12} {_short_doc(name, cmd.help)}')
        print('\nRun: wcagcontrast help <command> for full docs.')
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

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'wcagcontrast: loaded {env_path}', file=sys.stderr)

    if not args.command_name:
        parser.print_help()
        sys.exit(1)

    if args.command_name == 'help':
        _print_help(args.topic)
        return

    try:
        colors = [Color.from_hex(s) for s in args.colors]
    except InvalidColorFormat as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    report = Report()
    registry.get(args.command_name).execute(colors, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report, precision=get_precision()))


if __name__ == '__main__':
    main()
