"""
Challenge Report Package

Console and PDF reports for completed Mathematics Challenge sessions:
participant details, per-question answers, scores and timings.
"""

__version__ = "1.0.0"

from .models import QuestionAttempt, ReportInput, ExportResult
from .exceptions import ReportError, DocumentConstructionError, ReportIOError
from .config import ReportConfig
from .interfaces import ISessionParser, IReportRenderer, BaseRenderer
from .parsers import SessionParser
from .reports import ConsoleReporter, PdfReporter

__all__ = [
    # Models
    "QuestionAttempt",
    "ReportInput",
    "ExportResult",
    # Errors
    "ReportError",
    "DocumentConstructionError",
    "ReportIOError",
    # Configuration
    "ReportConfig",
    # Services
    "SessionParser",
    "ConsoleReporter",
    "PdfReporter",
    # Interfaces
    "ISessionParser",
    "IReportRenderer",
    "BaseRenderer",
]
