"""pagefit - batch scale-to-fit of document pages onto a named page size.

Every page is resized to the requested physical size (matching the
content's orientation), its content scaled uniformly to fit and centered,
with all original content moved under a single transformed group.

Example:
    >>> from pagefit import FitBatchProcessor, PageSizeTable
    >>> table = PageSizeTable.default()
    >>> summary = FitBatchProcessor(table.get("A4")).process_directory("scans/")
"""

from .batch import BatchSummary, FileResult, FitBatchProcessor
from .config import FitConfig
from .fit import FitResult, compute_fit, orient_page_size
from .rewriter import rewrite_page
from .sizes import PageSize, PageSizeTable

__version__ = "0.1.0"

__all__ = [
    "PageSize",
    "PageSizeTable",
    "FitResult",
    "compute_fit",
    "orient_page_size",
    "rewrite_page",
    "FitConfig",
    "FitBatchProcessor",
    "BatchSummary",
    "FileResult",
]
