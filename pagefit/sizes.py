"""Named physical page sizes.

This module provides:
- PageSize: Immutable (name, width, height) value in points
- PageSizeTable: Read-only, case-insensitive lookup of page sizes by name

The table is built once (``PageSizeTable.default()``) and passed explicitly
to the components that need it. Nothing in this module holds global state.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_PAGE_SIZE, POINTS_PER_INCH, UNIT_TO_POINTS, USAGE_COLUMNS
from .exceptions import InvalidConfigError, InvalidPageSizeError, UnknownPageSizeError


@dataclass(frozen=True)
class PageSize:
    """Physical page size in points (1/72 inch).

    Instances are immutable; orientation changes return a new value.

    Example:
        >>> letter = PageSize("LETTER", 612.0, 792.0)
        >>> letter.rotated()
        PageSize(name='LETTER', width=792.0, height=612.0)
    """

    name: str
    width: float
    height: float

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if not math.isfinite(value) or value <= 0:
                raise InvalidPageSizeError(f"Page size {self.name!r} has invalid {label}: {value}")

    @classmethod
    def from_units(cls, name: str, width: float, height: float, unit: str = "pt") -> PageSize:
        """Create a page size from dimensions in ``pt``, ``in``, ``mm`` or ``cm``.

        Raises:
            InvalidConfigError: If the unit is unknown
        """
        try:
            factor = UNIT_TO_POINTS[str(unit).lower()]
        except KeyError as e:
            valid = ", ".join(UNIT_TO_POINTS)
            raise InvalidConfigError(f"Unknown unit {unit!r} for page size {name!r}. Valid units: {valid}") from e
        try:
            width, height = float(width), float(height)
        except (TypeError, ValueError) as e:
            raise InvalidConfigError(f"Page size {name!r} needs numeric width and height") from e
        return cls(name.upper(), width * factor, height * factor)

    @property
    def is_landscape(self) -> bool:
        """True if wider than tall (square counts as portrait)."""
        return self.width > self.height

    def rotated(self) -> PageSize:
        """Return the same size with width and height swapped."""
        return PageSize(self.name, self.height, self.width)

    def landscape(self) -> PageSize:
        return self if self.is_landscape else self.rotated()


def _mm(name: str, width: float, height: float) -> PageSize:
    return PageSize.from_units(name, width, height, "mm")


def _inches(name: str, width: float, height: float) -> PageSize:
    return PageSize(name, width * POINTS_PER_INCH, height * POINTS_PER_INCH)


_ISO_A = [(841, 1189), (594, 841), (420, 594), (297, 420), (210, 297), (148, 210),
          (105, 148), (74, 105), (52, 74), (37, 52), (26, 37)]  # fmt: skip
_ISO_B = [(1000, 1414), (707, 1000), (500, 707), (353, 500), (250, 353), (176, 250),
          (125, 176), (88, 125), (62, 88), (44, 62), (31, 44)]  # fmt: skip
_ISO_C = [(917, 1297), (648, 917), (458, 648), (324, 458), (229, 324), (162, 229),
          (114, 162), (81, 114), (57, 81), (40, 57), (28, 40)]  # fmt: skip
_JIS_B = [(1030, 1456), (728, 1030), (515, 728), (364, 515), (257, 364), (182, 257),
          (128, 182), (91, 128), (64, 91), (45, 64), (32, 45)]  # fmt: skip


def _builtin_sizes() -> list[PageSize]:
    sizes = [
        # North American
        _inches("LETTER", 8.5, 11),
        _inches("LEGAL", 8.5, 14),
        _inches("TABLOID", 11, 17),
        _inches("LEDGER", 17, 11),
        _inches("EXECUTIVE", 7.25, 10.5),
        _inches("STATEMENT", 5.5, 8.5),
        _inches("HALF_LETTER", 5.5, 8.5),
        _inches("FOLIO", 8.5, 13),
        _inches("JUNIOR_LEGAL", 5, 8),
        _inches("GOVERNMENT_LETTER", 8, 10.5),
        _inches("GOVERNMENT_LEGAL", 8.5, 13),
    ]
    sizes += [_mm(f"A{i}", w, h) for i, (w, h) in enumerate(_ISO_A)]
    sizes += [_mm(f"B{i}", w, h) for i, (w, h) in enumerate(_ISO_B)]
    sizes += [_mm(f"C{i}", w, h) for i, (w, h) in enumerate(_ISO_C)]
    sizes += [_mm(f"JIS_B{i}", w, h) for i, (w, h) in enumerate(_JIS_B)]
    sizes += [
        # ANSI
        _inches("ANSI_A", 8.5, 11),
        _inches("ANSI_B", 11, 17),
        _inches("ANSI_C", 17, 22),
        _inches("ANSI_D", 22, 34),
        _inches("ANSI_E", 34, 44),
        # Architectural
        _inches("ARCH_A", 9, 12),
        _inches("ARCH_B", 12, 18),
        _inches("ARCH_C", 18, 24),
        _inches("ARCH_D", 24, 36),
        _inches("ARCH_E", 36, 48),
        _inches("ARCH_E1", 30, 42),
        # Envelopes
        _mm("DL", 110, 220),
        _inches("COM10", 4.125, 9.5),
        _inches("MONARCH", 3.875, 7.5),
    ]
    return sizes


class PageSizeTable:
    """Read-only mapping of uppercase page-size names to PageSize values.

    Lookup is case-insensitive through a single uppercasing step; names are
    not trimmed and no synonyms are resolved. Iteration order is the order
    in which sizes were added, which keeps usage output stable.

    Example:
        >>> table = PageSizeTable.default()
        >>> table.lookup("a4").name
        'A4'
        >>> table.lookup("A9000") is None
        True
    """

    def __init__(self, sizes: Iterable[PageSize], default_name: str = DEFAULT_PAGE_SIZE):
        entries: dict[str, PageSize] = {}
        for size in sizes:
            key = size.name.upper()
            if key in entries:
                raise InvalidConfigError(f"Duplicate page size name: {key}")
            entries[key] = size
        if default_name.upper() not in entries:
            raise InvalidConfigError(f"Default page size {default_name!r} is missing from the table")
        self._sizes = entries
        self._default_name = default_name.upper()

    @classmethod
    def default(cls) -> PageSizeTable:
        """Build the table of builtin page sizes."""
        return cls(_builtin_sizes())

    def with_sizes(self, custom: Mapping[str, Mapping[str, Any]]) -> PageSizeTable:
        """Return a new table extended with custom sizes.

        Args:
            custom: Mapping of name to ``{"width": ..., "height": ..., "unit": "mm"}``.
                A custom name replaces a builtin of the same name.

        Raises:
            InvalidConfigError: If a name is not a string, or an entry lacks width/height
                or uses an unknown unit
        """
        merged = dict(self._sizes)
        for name, entry in custom.items():
            if not isinstance(name, str):
                raise InvalidConfigError(f"Custom page size name must be a string, got {name!r}")
            try:
                width, height = entry["width"], entry["height"]
            except (KeyError, TypeError) as e:
                raise InvalidConfigError(f"Custom page size {name!r} needs 'width' and 'height'") from e
            merged[name.upper()] = PageSize.from_units(name, width, height, entry.get("unit", "pt"))
        return PageSizeTable(merged.values(), self._default_name)

    def lookup(self, name: str) -> PageSize | None:
        """Return the page size for ``name`` or None if it is unknown."""
        return self._sizes.get(name.upper())

    def get(self, name: str) -> PageSize:
        """Return the page size for ``name``.

        Raises:
            UnknownPageSizeError: If the name is not in the table
        """
        size = self.lookup(name)
        if size is None:
            raise UnknownPageSizeError(name)
        return size

    @property
    def default_size(self) -> PageSize:
        return self._sizes[self._default_name]

    def names(self) -> list[str]:
        return list(self._sizes)

    def format_columns(self, columns: int = USAGE_COLUMNS) -> str:
        """Render all names as a column-aligned grid for usage output."""
        lines = []
        names = self.names()
        for start in range(0, len(names), columns):
            row = names[start : start + columns]
            lines.append("".join(name.ljust(24) for name in row).rstrip())
        return "\n".join(lines)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._sizes

    def __iter__(self) -> Iterator[PageSize]:
        return iter(self._sizes.values())

    def __len__(self) -> int:
        return len(self._sizes)
