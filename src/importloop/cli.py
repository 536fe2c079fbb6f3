"""Command-line interface for importloop."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from importloop.pipeline import run
from importloop.renderer import RENDERERS


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="importloop",
        description="Find circular imports in a Python project.",
    )
    parser.add_argument(
        "project_dir",
        type=Path,
        help="Path to the Python project",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file (default: stdout)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=sorted(RENDERERS),
        default="text",
        dest="fmt",
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Skip modules whose dotted name matches this glob (repeatable)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if any circular import is found",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("importloop").setLevel(logging.DEBUG)

    report = run(
        args.project_dir,
        output=args.output,
        fmt=args.fmt,
        exclude=args.exclude,
    )

    if args.check and report.cycles:
        sys.exit(1)
