"""Protocol definitions for external library types.

These protocols define the minimal PyMuPDF surface the PDF backend uses,
without requiring the actual library for type checking.
"""

from __future__ import annotations

from typing import Protocol


class PyMuPDFRect(Protocol):
    """Protocol for PyMuPDF Rect object."""

    x0: float  # Left boundary
    y0: float  # Bottom boundary (unflipped MediaBox)
    x1: float  # Right boundary
    y1: float  # Top boundary (unflipped MediaBox)


class PyMuPDFPage(Protocol):
    """Protocol for PyMuPDF Page object."""

    xref: int
    rotation: int
    mediabox: PyMuPDFRect

    def get_contents(self) -> list[int]:
        """Return the xrefs of the page's content streams."""
        ...
