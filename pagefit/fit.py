"""Scale-to-fit geometry.

Pure functions computing how a page's content is fitted onto a named page
size: orientation correction, uniform containment scale and centering
offsets. No I/O happens here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import OFFSET_EPSILON
from .exceptions import InvalidGeometryError
from .sizes import PageSize
from .types.geometry import Matrix


@dataclass(frozen=True)
class FitResult:
    """Result of fitting one page onto a target page size.

    Attributes:
        target_width: Orientation-corrected target page width (points)
        target_height: Orientation-corrected target page height (points)
        scale: Uniform scale applied to both axes
        dx: Horizontal centering offset (points)
        dy: Vertical centering offset (points)
    """

    target_width: float
    target_height: float
    scale: float
    dx: float
    dy: float

    @property
    def matrix(self) -> Matrix:
        """Scale-then-translate as a single affine matrix ``[s 0 0 s dx dy]``."""
        return Matrix(self.scale, 0.0, 0.0, self.scale, self.dx, self.dy)


def _check_extent(source_width: float, source_height: float) -> None:
    for label, value in (("width", source_width), ("height", source_height)):
        if not math.isfinite(value) or value <= 0:
            raise InvalidGeometryError(f"Source {label} must be positive, got {value}")


def _snap(offset: float) -> float:
    return 0.0 if abs(offset) < OFFSET_EPSILON else offset


def orient_page_size(source_width: float, source_height: float, page_size: PageSize) -> PageSize:
    """Turn the requested size landscape when the source content is landscape.

    Only a landscape source (strictly wider than tall) changes the size;
    portrait and square sources keep it as given.

    Raises:
        InvalidGeometryError: If the source extent is not strictly positive
    """
    _check_extent(source_width, source_height)
    if source_width > source_height:
        return page_size.landscape()
    return page_size


def compute_fit(source_width: float, source_height: float, page_size: PageSize) -> FitResult:
    """Compute target dimensions, scale and centering offsets for one page.

    Args:
        source_width: Width of the page content (points, > 0)
        source_height: Height of the page content (points, > 0)
        page_size: Requested page size; turned landscape for a landscape source

    Returns:
        FitResult with the orientation-corrected target dimensions

    Raises:
        InvalidGeometryError: If the source extent is not strictly positive

    Example:
        >>> fit = compute_fit(1000, 500, PageSize("LETTER", 612, 792))
        >>> fit.target_width, fit.target_height, fit.scale, fit.dx, fit.dy
        (792, 612, 0.792, 0.0, 108.0)
    """
    target = orient_page_size(source_width, source_height, page_size)

    scale = min(target.width / source_width, target.height / source_height)
    dx = (target.width - source_width * scale) / 2.0
    dy = (target.height - source_height * scale) / 2.0

    return FitResult(
        target_width=target.width,
        target_height=target.height,
        scale=scale,
        dx=_snap(dx),
        dy=_snap(dy),
    )
