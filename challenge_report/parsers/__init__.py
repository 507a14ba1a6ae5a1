"""
Parsers for challenge session files.
"""

from .session import SessionParser

__all__ = [
    "SessionParser",
]
