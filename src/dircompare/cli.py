#!/usr/bin/env python3
"""
dircompare CLI — compare the contents of the given folders.
Prints one table row per distinct file content and one column per folder.
Read-only: no input file or directory is ever modified.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")
try:
    import regex
except ImportError:
    _MISSING_DEPS.append("regex")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from dircompare import __version__
from dircompare.core.errors import ConfigurationError, FileAccessError
from dircompare.core.models import (
    ComparisonParams, ComparisonReport, ReportMode, FingerprintMode, DEFAULT_COLUMN_WIDTH)
from dircompare.commands import ComparisonCommand
from dircompare.services.table_renderer import TableRenderer
from dircompare.aliases import (
    FINGERPRINT_ALIASES, FINGERPRINT_CHOICES, FINGERPRINT_HELP_TEXT,
    REPORT_HELP_TEXT, EPILOG_TEXT
)

EXIT_IO_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_INTERRUPTED = 130


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        sys.stdout.reconfigure(encoding='utf-8')
        sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dircompare",
            description="Simple command line tool to compare the contents of the given folders",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "directories",
            nargs="+",
            metavar="DIRECTORIES",
            help="A list of one or more directories; their order defines the column order"
        )

        # Filtering options
        parser.add_argument(
            "--extension",
            default=None,
            type=str,
            metavar="EXT",
            help="Optional filter: only regard files with this extension (case-sensitive, e.g. txt)"
        )

        # Report options
        report_group = parser.add_mutually_exclusive_group()
        report_group.add_argument(
            "--commononly",
            action="store_true",
            help=REPORT_HELP_TEXT["commononly"]
        )
        report_group.add_argument(
            "--diffonly",
            action="store_true",
            help=REPORT_HELP_TEXT["diffonly"]
        )

        # Comparison options
        parser.add_argument(
            "--hash",
            choices=FINGERPRINT_CHOICES,
            default="exact",
            type=str,
            dest="hash_mode",
            help=FINGERPRINT_HELP_TEXT
        )
        parser.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Also regard files in subfolders (names are shown relative to each folder)"
        )
        parser.add_argument(
            "--workers", "-j",
            default=1,
            type=int,
            metavar="N",
            help="Number of threads used to read and fingerprint files. Default: 1"
        )

        # Output options
        parser.add_argument(
            "--colwidth",
            default=DEFAULT_COLUMN_WIDTH,
            type=int,
            metavar="N",
            help=f"The width of each column in the output ASCII table. Default: {DEFAULT_COLUMN_WIDTH}"
        )
        verbosity_group = parser.add_mutually_exclusive_group()
        verbosity_group.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        verbosity_group.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress, statistics and informational log messages on stderr"
        )
        parser.add_argument(
            "--version", "-V",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Warn about arguments that are legal but probably unintended."""
        seen = set()
        for directory in args.directories:
            key = os.path.realpath(directory)
            if key in seen:
                self.warning(f"Directory given more than once: {directory} (shown as separate columns)")
            seen.add(key)

    def create_params(self, args: argparse.Namespace) -> ComparisonParams:
        """Create ComparisonParams from CLI arguments."""
        try:
            mode = ReportMode.from_flags(args.commononly, args.diffonly)
            fingerprint_mode = FINGERPRINT_ALIASES.get(args.hash_mode, FingerprintMode.EXACT)

            return ComparisonParams(
                directories=tuple(args.directories),
                extension=args.extension,
                mode=mode,
                fingerprint_mode=fingerprint_mode,
                recursive=args.recursive,
                workers=args.workers,
                column_width=args.colwidth,
            )
        except ConfigurationError as e:
            self.error_exit(str(e), code=EXIT_USAGE_ERROR)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
            sys.stderr.flush()
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
            sys.stderr.flush()

    def run_comparison(self, params: ComparisonParams) -> ComparisonReport:
        """Execute the comparison workflow."""
        command = ComparisonCommand()
        if self.verbose:
            print(f"Comparing {len(params.directories)} directories "
                  f"(report: {params.mode.display_name}, hash: {params.fingerprint_mode.value})...",
                  file=sys.stderr)

        try:
            report, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except FileAccessError as e:
            if self.verbose:
                sys.stderr.write("\n")
            self.error_exit(str(e), code=EXIT_IO_ERROR)
        except ConfigurationError as e:
            self.error_exit(str(e), code=EXIT_USAGE_ERROR)

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary(), file=sys.stderr)
            print(f"Files compared: {report.file_count} "
                  f"in {len(report.classes)} content classes", file=sys.stderr)

        return report

    @staticmethod
    def output_results(report: ComparisonReport, column_width: int) -> None:
        """Print the report table to stdout."""
        TableRenderer(column_width).write(report, sys.stdout)

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = EXIT_IO_ERROR) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger("dircompare").setLevel(logging.INFO)

        self.validate_args(args)
        params = self.create_params(args)

        report = self.run_comparison(params)
        self.output_results(report, params.column_width)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(EXIT_IO_ERROR)


if __name__ == "__main__":
    main()
