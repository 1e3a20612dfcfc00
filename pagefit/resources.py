"""Resource management utilities with context managers.

This module provides context managers that guarantee documents are closed
after each file, so no document tree outlives the file it belongs to.
"""

from __future__ import annotations

import gc
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .io.pdf import PdfDocument, load_pdf

logger = logging.getLogger(__name__)


@contextmanager
def open_pdf_document(pdf_path: str | Path) -> Iterator[PdfDocument]:
    """Context manager for a PyMuPDF-backed document.

    Automatically closes the document after use. PyMuPDF documents can
    hold significant memory, especially for large PDFs.

    Args:
        pdf_path: Path to the document (PDF, or a format PyMuPDF converts)

    Yields:
        PdfDocument wrapping the open ``fitz.Document``

    Raises:
        FileLoadError: If the document does not exist or cannot be opened

    Example:
        >>> with open_pdf_document("doc.pdf") as document:
        ...     print(f"Pages: {document.page_count}")
        ...     page = document.read_page(0)
        ...     # Document automatically closed after this block
    """
    document = load_pdf(Path(pdf_path))
    logger.debug("Opened document: %s (pages: %d)", document.path.name, document.page_count)
    try:
        yield document
    finally:
        document.close()
        logger.debug("Closed document: %s", document.path.name)
        # Force garbage collection to free memory
        gc.collect()
