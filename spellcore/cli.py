#!/usr/bin/env python3
"""
Spell-check text files from the command line.

Usage:
    spellcore README.md docs/guide.md
    spellcore --filenames --warn-word colour --warn-word color notes.txt
    python -m spellcore --debug --valid-word wibble example.txt

Exit status is the number of files with spelling errors (capped at 255).
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from spellcore.services.checker import SpellingChecker, create_checker
from spellcore.services.spellcheck_base import SpellingDetector
from spellcore.utils.logger import get_logger, setup_logging
from spellcore.utils.text_filters import DEFAULT_MARKER, compose_filters, fenced_code_filter, marker_filter

logger = get_logger("cli")

MAX_EXIT_STATUS = 255


class CheckRun:
    """Counts files with errors/warnings across one command-line run."""

    def __init__(self):
        self.current_file: Optional[str] = None
        self.found_errors = 0
        self.found_warnings = 0

    def errors(self, words: List[str]) -> None:
        print(f"Error: {self.current_file}: {', '.join(words)}")
        self.found_errors += 1

    def warnings(self, words: List[str]) -> None:
        print(f"Warning: {self.current_file}: {', '.join(words)}")
        self.found_warnings += 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spellcore",
        description="Check files for spelling errors and warnings"
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Files to check"
    )
    parser.add_argument(
        "--filenames", "-f",
        action="store_true",
        help="List files being checked"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Show debugging info"
    )
    parser.add_argument(
        "--valid-word",
        action="append",
        dest="valid_words",
        metavar="WORD",
        help="Treat WORD as correctly spelled (repeatable)"
    )
    parser.add_argument(
        "--warn-word",
        action="append",
        dest="warn_words",
        metavar="WORD",
        help="Report WORD as a warning instead of an error (repeatable)"
    )
    parser.add_argument(
        "--marker",
        default=DEFAULT_MARKER,
        help=f"Skip text between pairs of this marker (default: {DEFAULT_MARKER})"
    )
    parser.add_argument(
        "--skip-code",
        action="store_true",
        help="Skip Markdown code blocks and inline code"
    )
    return parser


def find_errors_in_file(checker: SpellingChecker, run: CheckRun, file_name: str, show_filename: bool) -> None:
    """Check one file, counting unreadable files as errors."""
    if show_filename:
        print(f'Checking file: "{file_name}"...')

    run.current_file = file_name
    try:
        text = Path(file_name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read file", file=file_name, error=str(e))
        print(f"Error: {file_name}: could not be read ({e})")
        run.found_errors += 1
        return

    checker.check(text)


def main(argv: Optional[List[str]] = None, detector: Optional[SpellingDetector] = None) -> int:
    """
    Run the checker over the given files.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        detector: Detector override (default: process-wide detector)

    Returns:
        Exit status: number of files with errors, capped at 255
    """
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.debug else None)

    check_run = CheckRun()
    checker = create_checker(
        {
            "log": print if args.debug else None,
            "errors": check_run.errors,
            "warnings": check_run.warnings,
            "filter": compose_filters(
                marker_filter(args.marker),
                fenced_code_filter() if args.skip_code else None,
            ),
            "warn_words": args.warn_words,
            "valid_words": args.valid_words,
        },
        detector=detector,
    )

    for file_name in args.files:
        find_errors_in_file(checker, check_run, file_name, args.filenames)

    if check_run.found_errors > 0 or check_run.found_warnings > 0:
        print()

    print(
        f"Check complete; there were {check_run.found_errors} errors "
        f"and {check_run.found_warnings} warnings."
    )
    return min(check_run.found_errors, MAX_EXIT_STATUS)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
