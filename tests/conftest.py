"""Pytest configuration and shared fixtures for pagefit tests.

This module provides:
- Page-size fixtures (default table, LETTER, A4)
- A factory writing real PDFs with PyMuPDF into tmp_path
- Test configuration and path setup
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import fitz
import pytest

# Ensure project root is importable when running tests via python -m pytest
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pagefit.sizes import PageSize, PageSizeTable  # noqa: E402


# ==================== Page Size Fixtures ====================


@pytest.fixture
def size_table() -> PageSizeTable:
    """Builtin page-size table."""
    return PageSizeTable.default()


@pytest.fixture
def letter(size_table: PageSizeTable) -> PageSize:
    """US Letter, 612 x 792 pt."""
    return size_table.get("LETTER")


@pytest.fixture
def a4(size_table: PageSizeTable) -> PageSize:
    """ISO A4, 595.28 x 841.89 pt."""
    return size_table.get("A4")


# ==================== PDF Fixtures ====================


@pytest.fixture
def make_pdf() -> Callable[..., Path]:
    """Factory writing a PDF with one page per (width, height) entry.

    Each page gets a line of text and a rectangle so it has real content
    streams. Pass ``text=False`` for pages without any content.

    Example:
        >>> path = make_pdf(tmp_path / "doc.pdf", [(612, 792), (1000, 500)])
    """

    def _make(path: Path, sizes: Sequence[tuple[float, float]], text: bool = True) -> Path:
        doc = fitz.open()
        for number, (width, height) in enumerate(sizes, start=1):
            page = doc.new_page(width=width, height=height)
            if text:
                page.insert_text((36, 36), f"Page {number} content", fontsize=11)
                page.draw_rect(fitz.Rect(10, 10, width - 10, height - 10), color=(1, 0, 0))
        path.parent.mkdir(parents=True, exist_ok=True)
        doc.save(str(path))
        doc.close()
        return path

    return _make
