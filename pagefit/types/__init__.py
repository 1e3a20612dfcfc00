"""Unified type definitions for pagefit.

This module provides:
- Rect, Matrix: Geometry in PDF user space
- Node, ContentStream, Group, NodeContainer: Page content tree
- FixedPage: One page's extent, boxes and content tree
- PageDocument: Document backend interface
"""

from .external import PyMuPDFPage, PyMuPDFRect
from .geometry import Matrix, Rect
from .interfaces import PageDocument
from .nodes import ContentStream, Group, Node, NodeContainer
from .page import FixedPage

__all__ = [
    # Geometry
    "Rect",
    "Matrix",
    # Content tree
    "Node",
    "NodeContainer",
    "ContentStream",
    "Group",
    "FixedPage",
    # Interfaces
    "PageDocument",
    # External library protocols
    "PyMuPDFRect",
    "PyMuPDFPage",
]
