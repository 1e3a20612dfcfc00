"""Sequential batch processor refitting every document in a folder."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path

from pagefit.batch.types import BatchSummary, FileResult
from pagefit.config import FitConfig
from pagefit.constants import OUTPUT_EXTENSION
from pagefit.exceptions import InputFolderError, InvalidGeometryError, PageFitError, PageProcessingError
from pagefit.fit import FitResult, compute_fit
from pagefit.resources import open_pdf_document
from pagefit.rewriter import rewrite_page
from pagefit.sizes import PageSize
from pagefit.types import PageDocument

logger = logging.getLogger(__name__)

DocumentOpener = Callable[[Path], AbstractContextManager[PageDocument]]


class FitBatchProcessor:
    """Refit all documents of an input folder onto one page size.

    Files are handled one at a time, in name order:
        open → for each page: read → compute_fit → rewrite_page → write → save

    Each file produces a FileResult. On failure the result records the
    error kind; the processor then either aborts the batch by re-raising
    (default) or moves on to the next file when ``continue_on_error`` is set.

    Example:
        >>> table = PageSizeTable.default()
        >>> processor = FitBatchProcessor(table.get("A4"))
        >>> summary = processor.process_directory(Path("scans/"))
        >>> summary.processed
        3
    """

    def __init__(
        self,
        page_size: PageSize,
        config: FitConfig | None = None,
        opener: DocumentOpener = open_pdf_document,
    ):
        """Initialize batch processor.

        Args:
            page_size: Requested page size (portrait or landscape as defined)
            config: Output naming, extensions and error policy
            opener: Context manager factory yielding an open PageDocument
        """
        self.page_size = page_size
        self.config = config or FitConfig(page_size=page_size.name)
        self.opener = opener

    def process_directory(self, input_dir: str | Path) -> BatchSummary:
        """Refit every supported document directly inside ``input_dir``.

        Args:
            input_dir: Folder containing the documents

        Returns:
            BatchSummary with one FileResult per matching document

        Raises:
            InputFolderError: If the folder does not exist, is not a folder or is empty
            PageFitError: The first file error, unless ``continue_on_error`` is set
        """
        input_dir = Path(input_dir)
        self._check_input_dir(input_dir)

        output_dir = input_dir / self.config.output_dir_name
        output_dir.mkdir(exist_ok=True)

        documents = self.find_documents(input_dir)
        logger.info(
            "Found %d document(s) in %s, fitting to %s (%.2f x %.2f pt)",
            len(documents),
            input_dir,
            self.page_size.name,
            self.page_size.width,
            self.page_size.height,
        )

        summary = BatchSummary(input_dir=input_dir, output_dir=output_dir, page_size=self.page_size.name)
        for path in documents:
            result = FileResult(input_path=path)
            summary.files.append(result)
            try:
                self.convert_file(path, output_dir, result)
            except PageFitError as exc:
                result.mark_failed(exc)
                logger.error("Failed: %s -> %s: %s", path.name, result.error_kind, exc)
                if not self.config.continue_on_error:
                    raise

        logger.info(
            "Batch complete: %d processed, %d failed, %d page(s) refitted",
            summary.processed,
            summary.failed,
            summary.total_pages,
        )
        return summary

    @staticmethod
    def _check_input_dir(input_dir: Path) -> None:
        if not input_dir.is_dir():
            raise InputFolderError(f"Input folder does not exist: {input_dir}")
        if next(input_dir.iterdir(), None) is None:
            raise InputFolderError(f"Input folder is empty: {input_dir}")

    def find_documents(self, input_dir: Path) -> list[Path]:
        """Regular files in ``input_dir`` with a supported extension, sorted by name."""
        return sorted(
            path for path in input_dir.iterdir() if path.is_file() and path.suffix.lower() in self.config.extensions
        )

    def output_path_for(self, input_path: Path, output_dir: Path) -> Path:
        """``<output_dir>/<stem><suffix>.pdf``"""
        return output_dir / f"{input_path.stem}{self.config.output_suffix}{OUTPUT_EXTENSION}"

    def convert_file(self, path: Path, output_dir: Path, result: FileResult | None = None) -> FileResult:
        """Refit every page of one document and save it.

        Raises:
            FileLoadError: If the document cannot be opened
            InvalidGeometryError: If a page has a non-positive extent
            PageProcessingError: If reading or writing a page fails otherwise
            FileSaveError: If the output cannot be written
        """
        result = result or FileResult(input_path=path)
        logger.info("Processing: %s", path.name)

        with self.opener(path) as document:
            result.page_count = document.page_count
            for index in range(document.page_count):
                self.fit_page(document, index)
                result.pages_done += 1

            output_path = self.output_path_for(path, output_dir)
            document.save(output_path)

        result.mark_completed(output_path)
        return result

    def fit_page(self, document: PageDocument, index: int) -> FitResult:
        """Refit page ``index`` (0-indexed) of an open document in place."""
        page_num = index + 1
        logger.info("  Beginning page %d...", page_num)
        try:
            page = document.read_page(index)
            fit = compute_fit(page.width, page.height, self.page_size)
            rewrite_page(page, fit)
            document.write_page(index, page)
        except InvalidGeometryError as exc:
            raise InvalidGeometryError(f"{document.path.name} page {page_num}: {exc}") from exc
        except PageFitError:
            raise
        except Exception as exc:  # noqa: BLE001 - backend errors are reported per page
            raise PageProcessingError(
                f"{document.path.name} page {page_num}: {exc}", document.path, page_num
            ) from exc

        logger.debug(
            "Page %d: %.2f x %.2f pt, scale=%.4f, offset=(%.2f, %.2f)",
            page_num,
            fit.target_width,
            fit.target_height,
            fit.scale,
            fit.dx,
            fit.dy,
        )
        return fit
