"""Batch conversion of a folder of documents.

Every supported document directly inside the input folder is opened, each
of its pages refitted onto the requested page size, and the result written
to ``<input>/out/<stem>_out.pdf``. Files are processed sequentially.

Usage:
    from pagefit.batch import FitBatchProcessor

    processor = FitBatchProcessor(page_size)
    summary = processor.process_directory(input_dir)
"""

from __future__ import annotations

from pagefit.batch.processor import FitBatchProcessor
from pagefit.batch.types import BatchSummary, FileResult

__all__ = [
    "FitBatchProcessor",
    "BatchSummary",
    "FileResult",
]
