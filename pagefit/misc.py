"""Miscellaneous helpers for pagefit."""

from __future__ import annotations

from datetime import UTC, datetime


def tz_now() -> datetime:
    """Return the current time in UTC, used for log file names."""
    return datetime.now(UTC)


def format_number(value: float) -> str:
    """Format a coordinate for a PDF object string.

    Integral values drop the fractional part and small rounding noise is
    trimmed, so ``612.0`` becomes ``612`` and ``0.7920000001`` stays compact.

    Example:
        >>> format_number(612.0)
        '612'
        >>> format_number(-0.0)
        '0'
        >>> format_number(0.792)
        '0.792'
    """
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text
