"""
Console reporting module for challenge results.

This module provides the ConsoleReporter class for generating
the fixed-width text report shown at the end of a challenge.
"""

import sys
from typing import List, TextIO

from ..interfaces import BaseRenderer
from ..models import QuestionAttempt, ReportInput
from ..utils import colorize, fit_to_width


REPORT_TITLE = "Challenge Report"
TITLE_RULE = "=" * 17
CLOSING_MESSAGE = "Thank you for participating in the Mathematics Challenge!"

LABEL_WIDTH = 30

# (header, width) in display order
COLUMNS = [
    ("Question", 50),
    ("Your Answer", 20),
    ("Correct Answer", 20),
    ("Score", 10),
    ("Time Taken", 10),
]

COLUMN_SEPARATOR = " | "

# Delimiter allowance added to the column widths for the rule line
SEPARATOR_OVERHEAD = 13


class ConsoleReporter(BaseRenderer):
    """
    Reporter for generating console output.

    Produces a heading, the participant details and a table with one
    row per question attempt. Output depends only on the input and the
    configuration, so rendering twice yields identical text.
    """

    def render(self, report: ReportInput, **kwargs) -> str:
        """Render the report as a string."""
        return self.format_report(report)

    def format_report(self, report: ReportInput) -> str:
        """
        Build the complete text report.

        Args:
            report: Session data to render

        Returns:
            Report text, newline terminated
        """
        lines = [""]
        lines.append(self._heading(REPORT_TITLE))
        lines.append(TITLE_RULE)

        lines.append(self._detail("Username", report.username))
        lines.append(self._detail("School Registration Number", report.school_reg_no))
        lines.append(self._detail("Total Time Taken", f"{report.total_time_seconds} seconds"))
        lines.append("")

        lines.append(self._header_row())
        lines.append("-" * self.separator_length())

        for attempt in report.attempts:
            lines.append(self._attempt_row(attempt))

        lines.append("")
        lines.append(self._heading(CLOSING_MESSAGE))
        return "\n".join(lines) + "\n"

    def print_report(self, report: ReportInput, stream: TextIO = None) -> None:
        """
        Write the text report.

        Args:
            report: Session data to render
            stream: Destination stream (default: standard output)
        """
        stream = stream or sys.stdout
        stream.write(self.format_report(report))

    @staticmethod
    def separator_length() -> int:
        """Length of the rule printed under the table header."""
        return sum(width for _, width in COLUMNS) + SEPARATOR_OVERHEAD

    def _heading(self, text: str) -> str:
        return colorize(text, self.config.heading_color, self.config.use_color)

    @staticmethod
    def _detail(label: str, value) -> str:
        return f"{label.ljust(LABEL_WIDTH)}: {value}"

    def _header_row(self) -> str:
        # Pad before colouring so escape codes do not eat into the width
        cells = [self._heading(fit_to_width(name, width)) for name, width in COLUMNS]
        return COLUMN_SEPARATOR.join(cells)

    @staticmethod
    def _attempt_row(attempt: QuestionAttempt) -> str:
        values = [
            attempt.question_text,
            attempt.given_answer,
            attempt.correct_answer,
            attempt.score,
            attempt.time_taken_seconds,
        ]
        cells: List[str] = [
            fit_to_width(value, width)
            for value, (_, width) in zip(values, COLUMNS)
        ]
        return COLUMN_SEPARATOR.join(cells)
