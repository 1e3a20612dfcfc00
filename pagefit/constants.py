"""Shared constants for pagefit."""

# =============================================================================
# Units
# =============================================================================
POINTS_PER_INCH = 72.0
"""PDF user-space units per inch."""

UNIT_TO_POINTS = {
    "pt": 1.0,
    "in": POINTS_PER_INCH,
    "mm": POINTS_PER_INCH / 25.4,
    "cm": POINTS_PER_INCH / 2.54,
}
"""Conversion factors from supported units to points."""

# =============================================================================
# Page Sizes
# =============================================================================
DEFAULT_PAGE_SIZE = "LETTER"
"""Page size used when none is requested (US Letter, 8.5in x 11in)."""

USAGE_COLUMNS = 4
"""Number of page-size names per row in usage output."""

# =============================================================================
# Fitting
# =============================================================================
OFFSET_EPSILON = 1e-9
"""Centering offsets closer to zero than this are snapped to 0.0."""

# =============================================================================
# Batch Output
# =============================================================================
OUTPUT_DIR_NAME = "out"
"""Subdirectory of the input folder receiving converted documents."""

OUTPUT_SUFFIX = "_out"
"""Appended to the input stem to name the output document."""

OUTPUT_EXTENSION = ".pdf"
"""Converted documents are always written as PDF."""

SUPPORTED_EXTENSIONS = (".pdf",)
"""File extensions processed by default (compared case-insensitively)."""

CONVERTIBLE_EXTENSIONS = (".xps", ".oxps", ".epub", ".cbz", ".fb2")
"""Extensions PyMuPDF can open and convert to PDF in memory."""
