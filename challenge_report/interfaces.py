"""
Interface definitions (Protocols) for the Challenge Report package.

This module defines abstract interfaces that enable loose coupling
between the session loader, the renderers and their callers, and
facilitate testing with mock implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable

from .config import ReportConfig
from .models import ReportInput


@runtime_checkable
class ISessionParser(Protocol):
    """
    Interface for session loaders.

    Any class implementing this interface can turn raw session data
    produced by the quiz runner into a ReportInput.
    """

    def parse(self, data: Dict[str, Any]) -> ReportInput:
        """
        Parse session data.

        Args:
            data: Decoded session record

        Returns:
            ReportInput ready for rendering
        """
        ...

    def parse_file(self, filepath: str) -> ReportInput:
        """Load and parse a session file."""
        ...


@runtime_checkable
class IReportRenderer(Protocol):
    """
    Interface for report renderers.
    """

    def render(self, report: ReportInput, **kwargs) -> Any:
        """
        Render a report.

        Args:
            report: Session data to render
            **kwargs: Additional renderer-specific arguments

        Returns:
            Renderer output (format depends on implementation)
        """
        ...


class BaseRenderer(ABC):
    """
    Abstract base class for report renderers.

    Holds the shared configuration.
    """

    def __init__(self, config: ReportConfig = None):
        """
        Initialize the renderer.

        Args:
            config: Rendering settings. Defaults to ReportConfig().
        """
        self.config = config or ReportConfig()

    @abstractmethod
    def render(self, report: ReportInput, **kwargs) -> Any:
        """Render a report."""
        pass
