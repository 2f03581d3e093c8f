#!/usr/bin/env python3
"""
NameKit CLI
===========
Command-line interface for business name generation and checking.

Usage:
    namekit generate tech software -i technology
    namekit generate coffee -i food --check
    namekit check "Voltix"
    namekit logo "Acme" -i finance -o logos/
    namekit favorites toggle "Voltix"
    namekit industries
"""

import argparse
import json
import logging
import random
import re
import sys
from pathlib import Path

from namekit import __version__


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def success(self, msg: str):
        if not self.quiet:
            print(f"OK: {msg}")

    def json(self, data):
        """JSON goes to stdout even in quiet mode."""
        print(json.dumps(data, indent=2))

    def table(self, headers: list, rows: list, col_widths: list = None):
        """Print a formatted table."""
        if self.quiet:
            return

        if not col_widths:
            col_widths = [max(len(str(h)), max((len(str(r[i])) for r in rows), default=0)) + 2
                          for i, h in enumerate(headers)]

        header_line = ''.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        print(header_line)
        print('-' * len(header_line))

        for row in rows:
            print(''.join(str(c).ljust(w) for c, w in zip(row, col_widths)))


def validate_name(name: str) -> tuple[bool, str]:
    """Validate a business name input."""
    if not name or not name.strip():
        return False, "Name cannot be empty"

    name = name.strip()

    if len(name) < 2:
        return False, "Name must be at least 2 characters"

    if len(name) > 40:
        return False, "Name must be at most 40 characters"

    if not re.match(r'^[a-zA-Z][a-zA-Z0-9 \-]*$', name):
        return False, "Name must start with a letter and contain only letters, digits, spaces or hyphens"

    return True, name


def _favorites(args):
    from favorites import FavoritesStore
    return FavoritesStore(getattr(args, 'favorites', None))


def print_record(record, out: Output, favorite: bool = False):
    """Human-readable summary of one GeneratedNameRecord."""
    star = " *" if favorite else ""
    out.print(f"\n{record.name}{star}")
    out.print("=" * 50)

    tm = record.trademark
    if tm is not None:
        marks = f" ({', '.join(tm.similar_marks)})" if tm.similar_marks else ""
        out.print(f"Trademark: {tm.risk_level.value.upper()}{marks}")
        out.print(f"  {tm.advice}")

    if record.domains:
        out.print("Domains:")
        for d in record.domains:
            status = "AVAILABLE" if d.available else d.status.value
            out.print(f"  {d.domain}: {status}")
            for link in d.registrars:
                out.print(f"    {link.name} ({link.price_range}): {link.url}")
    else:
        out.print("Domains: unavailable")

    if record.social:
        out.print("Social:")
        for s in record.social:
            status = "AVAILABLE" if s.available else s.status.value
            note = " (simulated)" if s.simulated else ""
            out.print(f"  {s.platform:<10} {s.handle}: {status}{note}")
    else:
        out.print("Social: unavailable")


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate business names."""
    from namekit import NameKit, NoKeywordsError, GenerationError
    from namekit.settings import require_setting

    if args.all and (args.check or args.patterns):
        out.error("--all cannot be combined with --check or --patterns")
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    kit = NameKit(rng=rng)

    try:
        if args.check:
            if not args.json:
                out.print(f"Generating and checking names for: {' '.join(args.keywords)}")
            records = kit.run(kit.generate_records(
                args.keywords, industry=args.industry,
                count=args.count, patterns=args.patterns,
            ))
        elif args.patterns:
            names = kit.generate_industry_names(args.keywords, args.industry, args.count)
        else:
            count = args.count
            if count is None and not args.all:
                count = int(require_setting("name_generator.default_count"))
            names = kit.generate(args.keywords, args.industry, count)
    except NoKeywordsError as e:
        out.error(str(e))
        return 1
    except GenerationError as e:
        out.error(str(e))
        return 1

    if args.check:
        if args.json:
            out.json([r.to_dict() for r in records])
            return 0
        favorites = _favorites(args)
        for record in records:
            print_record(record, out, favorite=record.name in favorites)
        out.print(f"\nGenerated {len(records)} names.")
        return 0

    if args.json:
        out.json(names)
        return 0

    if not names:
        out.print("No names generated.")
        return 0

    rows = []
    for i, name in enumerate(names, 1):
        risk = kit.assess(name).risk_level.value
        rows.append([i, name, risk])
    out.print()
    out.table(['#', 'Name', 'Trademark'], rows, [4, 20, 10])
    return 0


def cmd_check(args, out: Output):
    """Check one name: trademark risk, domains, social handles."""
    from namekit import NameKit

    valid, result = validate_name(args.name)
    if not valid:
        out.error(result)
        return 1
    name = result

    kit = NameKit()
    record = kit.check(name, industry=args.industry)

    if args.json:
        out.json(record.to_dict())
    else:
        print_record(record, out, favorite=name in _favorites(args))

    return 0 if record.trademark and record.trademark.risk_level.value == 'low' else 1


def cmd_logo(args, out: Output):
    """Render or export a logo."""
    from namekit import NameKit, LOGO_MIME_TYPE

    valid, result = validate_name(args.name)
    if not valid:
        out.error(result)
        return 1
    name = result

    kit = NameKit()
    if args.stdout:
        print(kit.logo(name, args.industry), end='')
        return 0

    path = kit.export_logo(name, args.industry, Path(args.output))
    out.success(f"Wrote {path} ({LOGO_MIME_TYPE})")
    return 0


def cmd_favorites(args, out: Output):
    """List or edit favorites."""
    store = _favorites(args)
    action = args.action

    if action == 'list':
        names = store.list()
        if args.json:
            out.json(names)
        elif not names:
            out.print("No favorites yet.")
        else:
            for name in names:
                out.print(name)
        return 0

    if not args.name:
        out.error(f"favorites {action} requires a name")
        return 1

    if action == 'add':
        if store.add(args.name):
            out.success(f"Added to favorites: {args.name}")
        else:
            out.print(f"Already a favorite: {args.name}")
    elif action == 'remove':
        if store.remove(args.name):
            out.success(f"Removed from favorites: {args.name}")
        else:
            out.print(f"Not a favorite: {args.name}")
    else:
        if store.toggle(args.name):
            out.success(f"Added to favorites: {args.name}")
        else:
            out.success(f"Removed from favorites: {args.name}")
    return 0


def cmd_industries(args, out: Output):
    """List available industries."""
    from namekit import list_industries

    rows = [[key, name] for key, name in list_industries().items()]
    out.table(['Key', 'Industry'], rows, [14, 24])
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    from namekit import list_industries

    industries = sorted(list_industries())

    parser = argparse.ArgumentParser(
        prog='namekit',
        description='NameKit - Business Name Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate tech software -i technology
  %(prog)s generate coffee -i food --check --seed 7
  %(prog)s generate cloud -i technology --patterns -n 15
  %(prog)s check "Voltix" --json
  %(prog)s logo "Acme" -i finance -o logos/
  %(prog)s favorites toggle "Voltix"
  %(prog)s industries
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    parser.add_argument('--favorites', help='Favorites file (default from app.yaml)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate business names')
    p.add_argument('keywords', nargs='*', help='Keywords (separated by spaces)')
    p.add_argument('--industry', '-i', choices=industries, help='Industry')
    p.add_argument('-n', '--count', type=int, help='Number of names (default: 8, patterns: 15)')
    p.add_argument('--all', '-a', action='store_true', help='Print the whole candidate pool')
    p.add_argument('--patterns', '-p', action='store_true', help='Use industry naming patterns')
    p.add_argument('--check', '-c', action='store_true',
                   help='Check trademark, domains and social handles for each name')
    p.add_argument('--seed', type=int, help='Random seed for reproducible output')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- check ---
    p = subparsers.add_parser('check', aliases=['c'], help='Check one name')
    p.add_argument('name', help='Business name to check')
    p.add_argument('--industry', '-i', choices=industries, help='Industry (for the logo palette)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- logo ---
    p = subparsers.add_parser('logo', help='Export an SVG logo')
    p.add_argument('name', help='Business name')
    p.add_argument('--industry', '-i', choices=industries, help='Industry palette')
    p.add_argument('--output', '-o', default='.', help='Output directory (default: .)')
    p.add_argument('--stdout', action='store_true', help='Print the SVG instead of writing a file')

    # --- favorites ---
    p = subparsers.add_parser('favorites', aliases=['fav'], help='Manage favorite names')
    p.add_argument('action', nargs='?', default='list', choices=['list', 'add', 'remove', 'toggle'])
    p.add_argument('name', nargs='?', help='Business name')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- industries ---
    subparsers.add_parser('industries', help='List available industries')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'c': 'check',
        'fav': 'favorites',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'check': cmd_check,
        'logo': cmd_logo,
        'favorites': cmd_favorites,
        'industries': cmd_industries,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
