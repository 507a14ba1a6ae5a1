#!/usr/bin/env python3
"""
Challenge Report - Main Entry Point

Prints the report for a finished Mathematics Challenge session and,
optionally, writes the question/answer PDF.

Usage:
    python main.py session.json
    python main.py session.json --pdf challenge_report.pdf
    python main.py session.json --no-color
"""

import argparse
import os
import sys

# Set UTF-8 encoding for console output (fixes Windows encoding issues)
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8')

from challenge_report import (
    ConsoleReporter,
    PdfReporter,
    ReportConfig,
    SessionParser,
)


EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_EXPORT_FAILED = 2


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Report generator for Mathematics Challenge sessions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py session.json
    (Print the text report)

  python main.py session.json --pdf report.pdf
    (Also write the question/answer PDF)

  NO_COLOR=1 python main.py session.json
    (Plain output without ANSI colours)
"""
    )

    parser.add_argument('session_file',
                        help='Path to the session JSON file saved by the quiz runner')
    parser.add_argument('--pdf', '-p', dest='pdf_file',
                        help='Write the PDF report to this path')
    parser.add_argument('--no-color', dest='no_color', action='store_true',
                        help='Disable ANSI colours in the text report')

    return parser


def main(argv=None) -> int:
    """Main function to render challenge reports."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    overrides = {"use_color": False} if args.no_color else {}
    config = ReportConfig.from_env(**overrides)

    if not os.path.exists(args.session_file):
        print(f"[ERROR] Session file not found: {args.session_file}")
        return EXIT_BAD_INPUT

    try:
        report = SessionParser().parse_file(args.session_file)
    except (OSError, ValueError) as e:
        print(f"[ERROR] Could not load session: {e}")
        return EXIT_BAD_INPUT

    ConsoleReporter(config).print_report(report)

    if args.pdf_file:
        print(f"\n[*] Writing PDF report for {len(report.attempts)} questions")
        result = PdfReporter(config).export(args.pdf_file, report.attempts)
        if not result.success:
            return EXIT_EXPORT_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
