"""
PDF report generation module.

This module provides the PdfReporter class, which writes a one-table
PDF listing every question of a challenge with its correct answer.
"""

from typing import List, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph, SimpleDocTemplate, Table, TableStyle
from reportlab.platypus.doctemplate import LayoutError

from ..exceptions import DocumentConstructionError, ReportIOError
from ..interfaces import BaseRenderer
from ..models import ExportResult, QuestionAttempt, ReportInput


REPORT_TITLE = "Challenge Report"

# Relative column widths: question, correct answer
COLUMN_RATIOS = (70, 30)

# Padding SimpleDocTemplate's frame keeps inside the margins, per side
FRAME_PADDING = 6


class PdfReporter(BaseRenderer):
    """
    Reporter for generating PDF documents.

    The document holds a centred bold title followed by a two-column
    table (question, correct answer). Text is never truncated; long
    questions wrap inside their cell.
    """

    def __init__(self, config=None):
        """Initialize reporter with styles."""
        super().__init__(config)

        self.body_style = ParagraphStyle(
            "ChallengeBody",
            fontName="Helvetica",
            fontSize=12,
            leading=14,
        )
        self.header_style = ParagraphStyle(
            "ChallengeHeader",
            parent=self.body_style,
            fontName="Helvetica-Bold",
        )
        self.title_style = ParagraphStyle(
            "ChallengeTitle",
            parent=self.header_style,
            alignment=TA_CENTER,
        )

        self.table_style = TableStyle([
            ('GRID', (0, 0), (-1, -1), 0.5, colors.black),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ])

    def render(self, report: ReportInput, **kwargs) -> ExportResult:
        """
        Render the report to the file named by the `filepath` keyword.

        Only the attempts are used; participant details are not part
        of the PDF layout.
        """
        return self.export(kwargs["filepath"], report.attempts)

    def export(self, filepath: str, attempts: Sequence[QuestionAttempt]) -> ExportResult:
        """
        Export the question/answer table to a PDF file.

        Args:
            filepath: Output file path
            attempts: Question attempts in question order

        Returns:
            ExportResult carrying a DocumentConstructionError or a
            ReportIOError when the export failed
        """
        try:
            self._write(filepath, attempts)
        except (DocumentConstructionError, ReportIOError) as e:
            print(f"[ERROR] PDF export failed: {e}")
            return ExportResult(filepath=filepath, error=e)

        print(f"[OK] PDF exported to: {filepath}")
        return ExportResult(filepath=filepath)

    def available_width(self) -> float:
        """Width of the page between the left and right margins."""
        page_width, _ = self.config.page_size
        return page_width - 2 * self.config.margin

    def build_table(self, attempts: Sequence[QuestionAttempt], available_width: float) -> Table:
        """
        Build the two-column question table.

        Args:
            attempts: Question attempts in question order
            available_width: Width the table spans, in points

        Returns:
            Table with a header row plus one row per attempt
        """
        table = Table(
            self.build_rows(attempts),
            colWidths=self.column_widths(available_width),
            repeatRows=1,
            splitInRow=1,
        )
        table.setStyle(self.table_style)
        return table

    @staticmethod
    def column_widths(available_width: float) -> List[float]:
        """Split the available width between the columns, 70/30."""
        total = sum(COLUMN_RATIOS)
        return [available_width * ratio / total for ratio in COLUMN_RATIOS]

    def build_rows(self, attempts: Sequence[QuestionAttempt]) -> List[List[Paragraph]]:
        """Table content: header row first, then one row per attempt."""
        rows = [[
            Paragraph("Question", self.header_style),
            Paragraph("Correct Answer", self.header_style),
        ]]
        for attempt in attempts:
            rows.append([
                Paragraph(escape(attempt.question_text), self.body_style),
                Paragraph(escape(attempt.correct_answer), self.body_style),
            ])
        return rows

    def _check_geometry(self) -> None:
        page_width, page_height = self.config.page_size
        frame_width = self.available_width() - 2 * FRAME_PADDING
        frame_height = page_height - 2 * self.config.margin - 2 * FRAME_PADDING
        if frame_width <= 0 or frame_height <= 0:
            raise DocumentConstructionError(
                f"Page size {page_width}x{page_height} leaves no room inside "
                f"{self.config.margin}pt margins"
            )

    def _write(self, filepath: str, attempts: Sequence[QuestionAttempt]) -> None:
        self._check_geometry()

        try:
            fh = open(filepath, "wb")
        except OSError as e:
            raise ReportIOError(f"Cannot open {filepath} for writing: {e}", filepath) from e

        with fh:
            doc = SimpleDocTemplate(
                fh,
                pagesize=self.config.page_size,
                leftMargin=self.config.margin,
                rightMargin=self.config.margin,
                topMargin=self.config.margin,
                bottomMargin=self.config.margin,
            )
            story = [
                Paragraph(REPORT_TITLE, self.title_style),
                Paragraph(" ", self.body_style),
                self.build_table(attempts, doc.width),
            ]
            try:
                doc.build(story)
            except LayoutError as e:
                raise DocumentConstructionError(f"Cannot lay out PDF report: {e}") from e
            except OSError as e:
                raise ReportIOError(f"Cannot write {filepath}: {e}", filepath) from e
