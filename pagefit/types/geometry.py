"""Rectangles and affine matrices in PDF user space.

Coordinates are floats in points. Matrices follow the PDF convention
``[a b c d e f]`` mapping ``(x, y)`` to ``(a*x + c*y + e, b*x + d*y + f)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..misc import format_number


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by two corners (x0, y0) and (x1, y1)."""

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_size(cls, width: float, height: float) -> Rect:
        """Rectangle anchored at the origin."""
        return cls(0.0, 0.0, width, height)

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def is_origin_anchored(self) -> bool:
        return self.x0 == 0 and self.y0 == 0

    def to_pdf(self) -> str:
        """Format as a PDF array, e.g. ``[0 0 612 792]``."""
        return "[" + " ".join(format_number(v) for v in (self.x0, self.y0, self.x1, self.y1)) + "]"


@dataclass(frozen=True)
class Matrix:
    """Affine transformation ``[a b c d e f]``.

    Example:
        >>> Matrix(0.5, 0, 0, 0.5, 10, 20).to_pdf()
        '0.5 0 0 0.5 10 20 cm'
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Matrix:
        return cls()

    @classmethod
    def translate(cls, tx: float, ty: float) -> Matrix:
        return cls(1.0, 0.0, 0.0, 1.0, tx, ty)

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def to_pdf(self) -> str:
        """Format as a ``cm`` operator, e.g. ``0.792 0 0 0.792 0 108 cm``."""
        return " ".join(format_number(v) for v in self.to_tuple()) + " cm"
