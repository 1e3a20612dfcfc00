"""Document I/O backends."""

from .pdf import PdfDocument, load_pdf

__all__ = ["PdfDocument", "load_pdf"]
