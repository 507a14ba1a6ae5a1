"""
Report generation modules for console and PDF output.
"""

from .console import ConsoleReporter
from .pdf import PdfReporter

__all__ = [
    "ConsoleReporter",
    "PdfReporter",
]
