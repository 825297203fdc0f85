#!/usr/bin/env python3
"""CLI interface for convert module."""

import argparse
from pathlib import Path

from common.constants import EXIT_OK, PROGRAM_NAME
from common.env import env
from common.logger import error, setup_logging, success

from .errors import ConversionError
from .main import convert_highlights


def cmd_convert(args):
    """Convert a highlights CSV export into per-book notes files.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        written = convert_highlights(
            args.input,
            args.search,
            output_dir=args.output,
            allow_multiple=args.force,
            obsidian=args.obsidian,
            encoding=env.input_encoding(),
        )
    except ConversionError as e:
        error(f"{PROGRAM_NAME}: {e}")
        return e.exit_code

    if written:
        success(f"Wrote {len(written)} notes file(s) to {written[0].parent}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Convert a CSV export of book highlights into per-book Markdown notes",
    )
    parser.add_argument("input", type=Path, help="CSV export of highlights")
    parser.add_argument(
        "-s",
        "--search",
        required=True,
        help="Search term; case-insensitive regular expression over book titles",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=env.output_dir(),
        help="Output folder (default: HIGHLIGHTS_OUTPUT_DIR or the current directory)",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Allow multiple matches without asking",
    )
    parser.add_argument(
        "--obs",
        "--obsidian",
        dest="obsidian",
        action="store_true",
        default=env.obsidian_mode(),
        help="Obsidian mode: escape '#' in highlights (default: HIGHLIGHTS_OBSIDIAN)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)
    return cmd_convert(args)


if __name__ == "__main__":
    exit(main())
