# -*- coding: ascii -*-
"""Command line interface."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from .batch import scan_tree, summarize
from .config import load_config
from .directives import split_script_list
from .errors import ConfigurationError
from .io_utils import write_table
from .locator import describe
from .schema import EXCLUDE_DIRS, KNOWN_SCRIPTS, STATUS_ERROR, STATUS_FAIL, STATUS_PASS
from .sources import make_selector

LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATION = 1
EXIT_ERROR = 2


def merge_cli_overrides(config: Dict[str, Any], args) -> Dict[str, Any]:
    """
    Apply command line options over file configuration.

    Args:
        config: Configuration from load_config()
        args: Parsed arguments of the check command

    Returns:
        New configuration dict; CLI values take precedence
    """
    merged = dict(config)
    if args.scripts:
        merged['scripts'] = list(split_script_list(args.scripts))
    if args.marker:
        merged['marker'] = args.marker
    if args.workers is not None:
        merged['workers'] = args.workers
    if args.exclude_dir:
        # Extends the configured list, or the built-in one when none is configured
        base = merged.get('exclude_dirs')
        if base is None:
            base = sorted(EXCLUDE_DIRS)
        merged['exclude_dirs'] = list(base) + args.exclude_dir
    return merged


def cmd_check(args) -> int:
    """Scan paths and print one line per file."""
    config = merge_cli_overrides(load_config(args.config), args)

    selector = None
    if config.get('extensions'):
        selector = make_selector(config['extensions'])

    outcomes = scan_tree(
        args.paths or None,
        config['scripts'],
        selector=selector,
        marker=config['marker'],
        workers=config['workers'],
        exclude_dirs=config.get('exclude_dirs'),
    )

    for outcome in outcomes:
        if outcome.status == STATUS_PASS:
            if args.verbose:
                print(f"PASS {outcome.path}")
        elif outcome.status == STATUS_FAIL:
            print(f"FAIL {outcome.message}")
        else:
            print(f"ERROR {outcome.message}")

    if args.report:
        write_table([o.to_record() for o in outcomes], args.report)
        LOG.info(f"Wrote report to {args.report}")

    counts = summarize(outcomes)
    print(f"Checked {len(outcomes)} files: {counts[STATUS_PASS]} passed, "
          f"{counts[STATUS_FAIL]} failed, {counts[STATUS_ERROR]} errors")

    if counts[STATUS_ERROR]:
        return EXIT_ERROR
    if counts[STATUS_FAIL]:
        return EXIT_VIOLATION
    return EXIT_OK


def cmd_scripts(args) -> int:
    """List known script names."""
    for name in KNOWN_SCRIPTS:
        print(name)
    return EXIT_OK


def cmd_describe(args) -> int:
    """Print code point, script(s) and name of each character of a string."""
    for char in args.text:
        info = describe(char)
        print(f"U+{ord(char):04X}\t{info.script}\t{info.name}")
    return EXIT_OK


def configure_logging(args):
    """Configure Python logging based on CLI arguments."""
    log_level = 'ERROR' if args.quiet else args.log_level
    logging.basicConfig(
        level=getattr(logging, log_level),
        format='%(levelname)s - %(name)s - %(message)s'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mixedscripts',
        description='Detect disallowed mixtures of Unicode scripts in text files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Directives inside scanned files:\n"
            "  text  ## mixedscripts Latin,Cyrillic,Common   allow scripts on this line\n"
            "  =for mixedscripts Cyrillic,Common             allow scripts from here on\n"
            "  =for mixedscripts default                     back to the default scripts\n"
        ),
    )

    # Global logging options
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], default='WARNING',
                        help='Set logging level (default: WARNING)')
    parser.add_argument('--quiet', action='store_true', help='Suppress all but error messages (equivalent to --log-level ERROR)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    check_parser = subparsers.add_parser('check', help='Check files for disallowed scripts')
    check_parser.add_argument('paths', nargs='*', help='Files or directories (default: current directory)')
    check_parser.add_argument('-c', '--config', help='Configuration file path (default: ./.mixedscripts.yaml)')
    check_parser.add_argument('-s', '--scripts', help='Comma-separated allowed scripts (default: Latin,Common)')
    check_parser.add_argument('--marker', help='Directive keyword (default: mixedscripts)')
    check_parser.add_argument('-j', '--workers', type=int, help='Number of worker processes')
    check_parser.add_argument('--exclude-dir', action='append', metavar='NAME',
                              help='Directory name to skip; may be repeated')
    check_parser.add_argument('--report', help='Write per-file results to .csv, .json or .parquet')
    check_parser.add_argument('-v', '--verbose', action='store_true', help='Also list passing files')

    subparsers.add_parser('scripts', help='List known script names')

    describe_parser = subparsers.add_parser('describe', help='Show the script and name of each character')
    describe_parser.add_argument('text', help='Text to describe')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    try:
        if args.command == 'check':
            return cmd_check(args)
        elif args.command == 'scripts':
            return cmd_scripts(args)
        elif args.command == 'describe':
            return cmd_describe(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(f"Unknown command: {args.command}")
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
