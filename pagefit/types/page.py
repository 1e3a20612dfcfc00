"""FixedPage - in-memory model of one page being refitted."""

from __future__ import annotations

from .geometry import Rect
from .nodes import NodeContainer


class FixedPage(NodeContainer):
    """A page's extent, boundary boxes and ordered content tree.

    The boxes follow PDF naming: ``media_box`` is the page extent,
    ``content_box`` corresponds to the PDF ArtBox. Missing boxes default
    to the media box, matching how PDF viewers resolve them.

    Attributes:
        width: Page width in points
        height: Page height in points
        media_box, crop_box, bleed_box, trim_box, content_box: Boundary rectangles
        number: Page number within its document (1-indexed), for diagnostics
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        media_box: Rect | None = None,
        crop_box: Rect | None = None,
        bleed_box: Rect | None = None,
        trim_box: Rect | None = None,
        content_box: Rect | None = None,
        number: int | None = None,
    ):
        super().__init__()
        self.width = width
        self.height = height
        self.media_box = media_box or Rect.from_size(width, height)
        self.crop_box = crop_box or self.media_box
        self.bleed_box = bleed_box or self.crop_box
        self.trim_box = trim_box or self.crop_box
        self.content_box = content_box or self.crop_box
        self.number = number

    def set_boxes(self, rect: Rect) -> None:
        """Set the media, crop, bleed, trim and content boxes to ``rect``."""
        self.media_box = rect
        self.crop_box = rect
        self.bleed_box = rect
        self.trim_box = rect
        self.content_box = rect

    def __repr__(self) -> str:
        return f"FixedPage(number={self.number}, width={self.width}, height={self.height}, children={self.child_count()})"
