"""
Command-line interface for parsing words.hk exports.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from .alignment import align_readings
from .config import load_config
from .exceptions import AlignmentError, ConfigError, DataSourceError
from .reader import ParseStats, get_csv_info, parse_csv_file


def main(argv: Optional[list] = None) -> int:
    """Main entry point for wordshk-parse CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    _configure_logging(args.verbose, args.quiet)
    return args.func(args)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordshk-parse",
        description="Parse the words.hk Cantonese dictionary export",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s (wordshk-parser)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every skipped row",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse an export CSV file and report statistics",
    )
    parse_parser.add_argument(
        "file",
        type=Path,
        help="CSV export file",
    )
    parse_parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with parser settings",
    )
    parse_parser.add_argument(
        "--workers",
        type=int,
        help="Number of worker processes (overrides config)",
    )
    parse_parser.add_argument(
        "--show-errors",
        action="store_true",
        help="List every row that failed to parse",
    )
    parse_parser.set_defaults(func=cmd_parse)

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show the export file and date found in a data folder",
    )
    info_parser.add_argument(
        "folder",
        type=Path,
        help="Folder containing the all-<epoch>.csv export",
    )
    info_parser.set_defaults(func=cmd_info)

    # align command
    align_parser = subparsers.add_parser(
        "align",
        help="Align Cantonese text with its Jyutping reading",
    )
    align_parser.add_argument("text", help="Cantonese text")
    align_parser.add_argument("reading", help="Jyutping reading")
    align_parser.set_defaults(func=cmd_align)

    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_parse(args: argparse.Namespace) -> int:
    """Handle parse command."""
    try:
        config = load_config(args.config)
    except (ConfigError, FileNotFoundError) as e:
        print(f"\n  [CONFIG ERROR] {e}")
        return 1

    if args.workers is not None:
        if args.workers < 1:
            print("\n  [ERROR] --workers must be at least 1")
            return 1
        config = replace(config, workers=args.workers)

    print(f"\nParsing {args.file}...")
    try:
        result = parse_csv_file(args.file, config)
    except (DataSourceError, FileNotFoundError) as e:
        print(f"\n  [ERROR] {e}")
        return 1

    _print_stats(result.stats, show_errors=args.show_errors)
    return 1 if result.stats.errors else 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle info command."""
    try:
        info = get_csv_info(args.folder)
    except (DataSourceError, FileNotFoundError) as e:
        print(f"\n  [ERROR] {e}")
        return 1

    print(f"  File: {info.all_csv}")
    print(f"  Date: {info.date_string}")
    return 0


def cmd_align(args: argparse.Namespace) -> int:
    """Handle align command."""
    try:
        pairs = align_readings(args.text, args.reading)
    except AlignmentError as e:
        print(f"\n  [ALIGNMENT ERROR] {e}")
        return 1

    width = max((len(p.text) for p in pairs), default=0)
    for pair in pairs:
        print(f"  {pair.text:<{width}}  {pair.reading or '-'}")
    return 0


def _print_stats(stats: ParseStats, show_errors: bool = False) -> None:
    """Print batch statistics."""
    print(f"\nResults:")
    print(f"  Total:       {stats.total}")
    print(f"  Parsed:      {stats.parsed}")
    print(f"  No data:     {stats.no_data}")
    print(f"  Unreviewed:  {stats.unreviewed}")
    print(f"  Unpublished: {stats.unpublished}")
    print(f"  Errors:      {stats.errors}")

    if show_errors and stats.failures:
        print(f"\nFailed rows:")
        for failure in stats.failures:
            print(f"  [{failure.row_id}] {failure.message}")


if __name__ == "__main__":
    sys.exit(main())
