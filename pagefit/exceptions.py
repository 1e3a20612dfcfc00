"""Custom exception classes for pagefit.

This module defines a hierarchy of custom exceptions so that callers can
tell user-input problems, malformed pages and I/O failures apart.

Exception Hierarchy:
    PageFitError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigError
    │   ├── InvalidPageSizeError
    │   ├── UnknownPageSizeError
    │   └── InputFolderError
    ├── ProcessingError
    │   ├── InvalidGeometryError
    │   ├── PageProcessingError
    │   └── NodeOwnershipError
    └── FileError
        ├── FileLoadError
        └── FileSaveError

Usage:
    try:
        fit = compute_fit(width, height, page_size)
    except InvalidGeometryError as e:
        # Malformed page, not an I/O problem
        logger.error("Bad page geometry: %s", e)
    except PageFitError as e:
        logger.error("pagefit error: %s", e)
"""

from __future__ import annotations


class PageFitError(Exception):
    """Base exception for all pagefit errors.

    All custom exceptions in the package inherit from this class.
    """


# ============================================================================
# Configuration Errors (user input)
# ============================================================================


class ConfigurationError(PageFitError):
    """Base exception for user-input and configuration errors.

    The CLI reports these together with the usage text.
    """


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid or malformed.

    Examples:
        - Malformed YAML
        - Unknown unit for a custom page size
        - Extension list that does not start with a dot
    """


class InvalidPageSizeError(ConfigurationError):
    """Raised when a page size has a non-positive or non-finite dimension."""


class UnknownPageSizeError(ConfigurationError):
    """Raised when a requested page-size name is not in the table."""

    def __init__(self, name: str):
        super().__init__(f"Page size not recognized: {name}")
        self.name = name


class InputFolderError(ConfigurationError):
    """Raised when the input folder is missing, not a directory, or empty."""


# ============================================================================
# Processing Errors
# ============================================================================


class ProcessingError(PageFitError):
    """Base exception for page processing errors."""


class InvalidGeometryError(ProcessingError):
    """Raised when a page's source extent is not strictly positive.

    The fit computation never clamps or recovers from this; the page is
    considered malformed.
    """


class PageProcessingError(ProcessingError):
    """Raised when processing a specific page fails.

    Attributes:
        path: Document the page belongs to
        page_num: Page number (1-indexed)
    """

    def __init__(self, message: str, path: object = None, page_num: int | None = None):
        super().__init__(message)
        self.path = path
        self.page_num = page_num


class NodeOwnershipError(ProcessingError):
    """Raised when a page tree node would end up with two parents."""


# ============================================================================
# File Errors
# ============================================================================


class FileError(PageFitError):
    """Base exception for document I/O errors."""


class FileLoadError(FileError):
    """Raised when opening a document fails.

    Examples:
        - File not found
        - Corrupted or encrypted file
        - Format PyMuPDF cannot open
    """


class FileSaveError(FileError):
    """Raised when writing a document fails.

    Examples:
        - Permission denied
        - Disk full
    """
