"""Component interface definitions for pagefit.

This module defines Protocol interfaces for the document backend:
- PageDocument: An open document whose pages can be read and written back
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .page import FixedPage


@runtime_checkable
class PageDocument(Protocol):
    """Open document exposing its pages as FixedPage trees.

    The batch processor only talks to documents through this interface,
    so tests can drive it with an in-memory implementation.

    Attributes:
        path: Source path of the document

    Example:
        >>> with open_pdf_document(Path("doc.pdf")) as document:
        ...     page = document.read_page(0)
        ...     rewrite_page(page, compute_fit(page.width, page.height, letter))
        ...     document.write_page(0, page)
        ...     document.save(Path("doc_out.pdf"))
    """

    path: Path

    @property
    def page_count(self) -> int:
        """Number of pages in document order."""
        ...

    def read_page(self, index: int) -> FixedPage:
        """Load page ``index`` (0-indexed) into a FixedPage."""
        ...

    def write_page(self, index: int, page: FixedPage) -> None:
        """Store the FixedPage's boxes and content tree back into page ``index``."""
        ...

    def save(self, output_path: Path) -> None:
        """Write the document to ``output_path``."""
        ...
