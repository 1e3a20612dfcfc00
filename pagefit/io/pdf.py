"""PDF document backend built on PyMuPDF.

Pages are exposed as FixedPage trees whose leaves are the page's existing
content streams (by xref). Writing a page back never touches the bytes of
those streams: a Group becomes a pair of new streams ``q <matrix> cm`` and
``Q`` placed around its children in the page's ``/Contents`` array.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

import fitz  # PyMuPDF

from ..constants import CONVERTIBLE_EXTENSIONS
from ..exceptions import FileLoadError, FileSaveError, PageProcessingError
from ..types import ContentStream, FixedPage, Group, Matrix, Node, PyMuPDFPage, Rect

logger = logging.getLogger(__name__)

# PDF key for each FixedPage box attribute; content box is the ArtBox
BOX_KEYS = {
    "media_box": "MediaBox",
    "crop_box": "CropBox",
    "bleed_box": "BleedBox",
    "trim_box": "TrimBox",
    "content_box": "ArtBox",
}


class PdfDocument:
    """Open PDF document implementing the PageDocument interface.

    Attributes:
        path: Source path
        doc: Underlying ``fitz.Document``
        converted: True if ``doc`` was converted to PDF from another format
    """

    def __init__(self, doc: Any, path: Path, converted: bool = False):
        self.doc = doc
        self.path = path
        self.converted = converted

    @property
    def page_count(self) -> int:
        return self.doc.page_count

    # ==================== Reading ====================

    def read_page(self, index: int) -> FixedPage:
        """Load page ``index`` (0-indexed) into a FixedPage.

        The extent comes from PyMuPDF's unrotated MediaBox, inherited from
        the page tree when the page has none of its own. ``/Rotate`` is left
        untouched, so content is fitted in the page's own coordinate system.
        If the MediaBox does not start at the origin, the content streams are
        wrapped in a Group translating the MediaBox corner to (0, 0).
        """
        page: PyMuPDFPage = self.doc.load_page(index)
        mb = page.mediabox
        media_box = Rect(mb.x0, mb.y0, mb.x1, mb.y1)
        fixed = FixedPage(media_box.width, media_box.height, media_box=media_box, number=index + 1)

        content_xrefs = page.get_contents()
        streams: list[Node] = [ContentStream(xref) for xref in content_xrefs]
        if not media_box.is_origin_anchored:
            streams = [Group(Matrix.translate(-media_box.x0, -media_box.y0), streams)]
        for node in streams:
            fixed.append_child(node)

        logger.debug(
            "Read page %d of %s: %.2f x %.2f, %d content stream(s), rotation %d",
            index + 1,
            self.path.name,
            fixed.width,
            fixed.height,
            len(content_xrefs),
            page.rotation,
        )
        return fixed

    # ==================== Writing ====================

    def _new_stream(self, data: bytes) -> int:
        xref = self.doc.get_new_xref()
        self.doc.update_object(xref, "<<>>")
        self.doc.update_stream(xref, data)
        return xref

    def _emit(self, node: Node, xrefs: list[int]) -> None:
        if isinstance(node, ContentStream):
            xrefs.append(int(node.ref))
        elif isinstance(node, Group):
            xrefs.append(self._new_stream(f"\nq\n{node.matrix.to_pdf()}\n".encode("ascii")))
            for child in node.children:
                self._emit(child, xrefs)
            xrefs.append(self._new_stream(b"\nQ\n"))
        else:
            raise PageProcessingError(f"Unsupported node type: {type(node).__name__}", self.path)

    def write_page(self, index: int, page: FixedPage) -> None:
        """Store boxes and the content tree of ``page`` into PDF page ``index``."""
        page_xref = self.doc.page_xref(index)

        for attr, key in BOX_KEYS.items():
            self.doc.xref_set_key(page_xref, key, getattr(page, attr).to_pdf())

        xrefs: list[int] = []
        for child in page.children:
            self._emit(child, xrefs)
        contents = " ".join(f"{xref} 0 R" for xref in xrefs)
        self.doc.xref_set_key(page_xref, "Contents", f"[{contents}]")

        logger.debug("Wrote page %d of %s with %d content stream(s)", index + 1, self.path.name, len(xrefs))

    def save(self, output_path: Path) -> None:
        """Write the document to ``output_path``.

        A document without pages cannot be written by PyMuPDF; a PDF source
        file is copied unchanged instead.

        Raises:
            FileSaveError: If the file cannot be written, or if a converted
                document has no pages
        """
        if self.doc.page_count == 0:
            self._copy_source(output_path)
            return
        try:
            self.doc.save(str(output_path), garbage=3, deflate=True)
        except Exception as exc:  # noqa: BLE001 - PyMuPDF raises several unrelated types
            raise FileSaveError(f"Failed to write {output_path}: {exc}") from exc
        logger.info("Saved: %s", output_path)

    def _copy_source(self, output_path: Path) -> None:
        if self.converted:
            raise FileSaveError(f"{self.path.name} has no pages to convert to PDF")
        logger.warning("%s has no pages, copying it unchanged", self.path.name)
        try:
            shutil.copyfile(self.path, output_path)
        except OSError as exc:
            raise FileSaveError(f"Failed to write {output_path}: {exc}") from exc
        logger.info("Saved: %s", output_path)

    def close(self) -> None:
        self.doc.close()


def load_pdf(path: Path) -> PdfDocument:
    """Open ``path`` with PyMuPDF as a PdfDocument.

    Non-PDF formats PyMuPDF understands (XPS, OXPS, EPUB, ...) are converted
    to PDF in memory first.

    Raises:
        FileLoadError: If the file is missing or PyMuPDF cannot open it
    """
    if not path.is_file():
        raise FileLoadError(f"Document not found: {path}")

    converted = False
    try:
        doc = fitz.open(str(path))
        if not doc.is_pdf:
            if path.suffix.lower() not in CONVERTIBLE_EXTENSIONS:
                doc.close()
                raise FileLoadError(f"Unsupported document format: {path.name}")
            logger.info("Converting %s to PDF", path.name)
            pdf_bytes = doc.convert_to_pdf()
            doc.close()
            doc = fitz.open("pdf", pdf_bytes)
            converted = True
    except FileLoadError:
        raise
    except Exception as exc:  # noqa: BLE001 - PyMuPDF raises several unrelated types
        raise FileLoadError(f"Failed to open {path}: {exc}") from exc

    if doc.needs_pass:
        doc.close()
        raise FileLoadError(f"Document is encrypted: {path}")

    return PdfDocument(doc, path, converted=converted)
