"""
Exception types raised or returned by the report writers.
"""

from typing import Optional


class ReportError(Exception):
    """Base class for report generation failures."""


class DocumentConstructionError(ReportError):
    """The PDF document or its table could not be built."""


class ReportIOError(ReportError):
    """The report destination could not be opened or written."""

    def __init__(self, message: str, filepath: Optional[str] = None):
        super().__init__(message)
        self.filepath = filepath
