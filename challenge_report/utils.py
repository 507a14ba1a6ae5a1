"""
Utility functions for the Challenge Report package.

This module contains helpers for duration conversion, fixed-width
cell formatting and terminal colouring.
"""


# ANSI escape codes
ANSI_RESET = "\x1b[0m"
ANSI_CYAN = "\x1b[36m"

ELLIPSIS = "..."


def ms_to_seconds(milliseconds: int) -> int:
    """
    Convert milliseconds to whole seconds, discarding the fraction.

    Examples:
        >>> ms_to_seconds(12345)
        12
        >>> ms_to_seconds(999)
        0
    """
    return milliseconds // 1000


def truncate(text: str, width: int) -> str:
    """
    Shorten text to at most `width` characters.

    Text that does not fit is cut to `width - 3` characters and
    suffixed with '...'. Shorter text is returned unchanged.

    Examples:
        >>> truncate('What is 12 + 30?', 10)
        'What is...'
        >>> truncate('42', 10)
        '42'
    """
    if len(text) <= width:
        return text
    return text[:width - len(ELLIPSIS)] + ELLIPSIS


def fit_to_width(value, width: int) -> str:
    """
    Format a table cell: truncate, then left-justify to exactly `width`.

    Args:
        value: Cell value; non-strings are converted with str()
        width: Column width in characters

    Returns:
        String of exactly `width` characters
    """
    return truncate(str(value), width).ljust(width)


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in an ANSI colour code and reset, unless disabled."""
    if not enabled:
        return text
    return f"{color}{text}{ANSI_RESET}"
