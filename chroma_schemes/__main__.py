"""chroma-tool: inspect and resolve colour scheme files.

Usage: chroma-tool <command> <scheme-file> [options]

Built-in colour functions are auto-discovered from chroma_schemes/functions/.
Run `chroma-tool functions <name>` for a function's full docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, chroma-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.

  CHROMA_OUTPUT_STYLE   expanded (default) or compressed
  CHROMA_LOG_LEVEL      DEBUG, INFO, WARNING (default), ...
"""

import argparse
import importlib
import logging
import os
import sys

from chroma_schemes import registry
from chroma_schemes.api import Chroma
from chroma_schemes.core import env
from chroma_schemes.core.errors import ChromaError
from chroma_schemes.core.report import format_json, format_kss_markup, format_kss_styles, format_text
from chroma_schemes.core.types import css_text


def _load_function_module(name: str) -> object:
    """Load the raw module for a built-in function (for docstring access)."""
    return importlib.import_module(f'chroma_schemes.functions.{name}')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  chroma-tool show palette.chroma\n'
        '  chroma-tool show palette.chroma --scheme alt --json\n'
        '  chroma-tool colour palette.chroma link alt hover\n'
        '  chroma-tool --output-style compressed colour palette.chroma grey\n'
        '  chroma-tool kss palette.chroma --scheme alt --styles\n'
        '  chroma-tool functions shade\n'
    )
    parser = argparse.ArgumentParser(
        prog='chroma-tool',
        description='Inspect and resolve colour scheme files.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument(
        '-o',
        '--output-style',
        choices=env.OUTPUT_STYLES,
        default=None,
        help='Output style the host uses (default: CHROMA_OUTPUT_STYLE or expanded)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    show = sub.add_parser('show', help='Print every scheme with its resolved colours')
    show.add_argument('file', help='Path to scheme file')
    show.add_argument('-s', '--scheme', help='Only this scheme')
    show.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    col = sub.add_parser('colour', help='Resolve one colour: NAME [SCHEME] [FUNCTION] [ARGS...]')
    col.add_argument('file', help='Path to scheme file')
    col.add_argument('name', help='Colour name')
    col.add_argument('args', nargs='*', help='Scheme, function/variant and function arguments')
    col.add_argument('-a', '--active', help='Active scheme when no scheme is given')

    kss = sub.add_parser('kss', help='Print KSS style guide markup for a scheme')
    kss.add_argument('file', help='Path to scheme file')
    kss.add_argument('-s', '--scheme', help='Scheme (default: the default scheme)')
    kss.add_argument('--styles', action='store_true', help='Print the swatch CSS instead of the markup')

    fns = sub.add_parser('functions', help='List built-in colour functions, or print one function\'s docs')
    fns.add_argument('name', nargs='?', help='Function name')

    return parser


def _print_functions(name: str | None) -> None:
    """Print the built-in function list, or one function's module docstring."""
    functions = registry.discover()

    if name is None:
        print('Available functions:\n')
        for fn_name, fn in sorted(functions.items()):
            print(f'  {fn_name:<10} {fn.help}')
        print('\nRun: chroma-tool functions <name> for full docs.')
        return

    if name not in functions:
        print(f'Unknown function: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(functions))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_function_module(name).__doc__ or '').strip()
    print(doc or f'(No module docs for {name!r})')


def _run(args: argparse.Namespace) -> None:
    if not os.path.isfile(args.file):
        print(f'Error: scheme file not found: {args.file}', file=sys.stderr)
        sys.exit(1)

    chroma = Chroma(output_style=args.output_style)
    chroma.load_file(args.file)

    if args.command == 'show':
        if args.json:
            print(format_json(chroma, scheme=args.scheme))
        else:
            print(format_text(chroma, source=args.file, scheme=args.scheme))
    elif args.command == 'colour':
        if args.active:
            chroma.active_scheme = args.active
        print(css_text(chroma.colour(args.name, *args.args)))
    elif args.command == 'kss':
        if args.styles:
            print(format_kss_styles(chroma, args.scheme))
        else:
            print(format_kss_markup(chroma, args.scheme))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = env.load_env(env_file=args.env_file)
    logging.basicConfig(level=env.log_level(), format='%(levelname)s %(name)s: %(message)s')
    if env_path:
        print(f'chroma-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'functions':
        _print_functions(args.name)
        return

    try:
        _run(args)
    except (ChromaError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
