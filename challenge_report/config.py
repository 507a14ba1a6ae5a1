"""
Rendering configuration for challenge reports.
"""

import os
from dataclasses import dataclass
from typing import Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import inch

from .utils import ANSI_CYAN


@dataclass
class ReportConfig:
    """
    Settings shared by the console and PDF reporters.

    Attributes:
        use_color: Wrap headings in ANSI colour codes (console only)
        heading_color: ANSI escape sequence used for headings
        page_size: PDF page size in points (width, height)
        margin: PDF page margin in points, applied on all four sides
    """

    use_color: bool = True
    heading_color: str = ANSI_CYAN
    page_size: Tuple[float, float] = A4
    margin: float = inch

    @classmethod
    def from_env(cls, **overrides) -> "ReportConfig":
        """
        Build a config from the environment.

        Colour is disabled when NO_COLOR is set to a non-empty value.
        Keyword arguments override the derived values.
        """
        settings = {"use_color": not os.environ.get("NO_COLOR")}
        settings.update(overrides)
        return cls(**settings)
