"""Tests for PageSize and PageSizeTable.

Tests cover:
- PageSize validation and orientation helpers
- Case-insensitive lookup, unknown names
- Custom sizes and usage formatting
"""

from __future__ import annotations

import pytest

from pagefit.exceptions import InvalidConfigError, InvalidPageSizeError, UnknownPageSizeError
from pagefit.sizes import PageSize, PageSizeTable


class TestPageSize:
    """Tests for the PageSize value type."""

    def test_rotated_returns_new_value(self):
        """Test that rotation swaps dimensions without mutating the original."""
        letter = PageSize("LETTER", 612.0, 792.0)

        rotated = letter.rotated()

        assert (rotated.width, rotated.height) == (792.0, 612.0)
        assert (letter.width, letter.height) == (612.0, 792.0)

    def test_orientation_helpers(self):
        """Test the landscape helper and the square tie-break."""
        letter = PageSize("LETTER", 612.0, 792.0)

        assert not letter.is_landscape
        assert letter.landscape().is_landscape
        assert letter.landscape().landscape() == letter.rotated()
        assert not PageSize("SQUARE", 500.0, 500.0).is_landscape

    @pytest.mark.parametrize("width,height", [(0, 792), (612, -1), (float("nan"), 792), (float("inf"), 792)])
    def test_invalid_dimensions_raise(self, width, height):
        """Test that non-positive or non-finite dimensions are rejected."""
        with pytest.raises(InvalidPageSizeError):
            PageSize("BAD", width, height)

    def test_from_units(self):
        """Test unit conversion to points."""
        size = PageSize.from_units("card", 2, 3, "in")

        assert size.name == "CARD"
        assert size.width == pytest.approx(144.0)
        assert size.height == pytest.approx(216.0)

    def test_from_units_unknown_unit(self):
        """Test that unknown units raise InvalidConfigError."""
        with pytest.raises(InvalidConfigError, match="Unknown unit"):
            PageSize.from_units("card", 2, 3, "furlong")


class TestPageSizeTableLookup:
    """Tests for PageSizeTable lookup."""

    def test_letter_is_default(self, size_table):
        """Test the designated default entry."""
        assert size_table.default_size.name == "LETTER"
        assert (size_table.default_size.width, size_table.default_size.height) == (612.0, 792.0)

    @pytest.mark.parametrize("name", ["a4", "A4"])
    def test_lookup_is_case_insensitive(self, size_table, name):
        """Test that lookup uppercases the name."""
        size = size_table.lookup(name)

        assert size is not None
        assert size.name == "A4"
        assert size.width == pytest.approx(595.28, abs=0.01)
        assert size.height == pytest.approx(841.89, abs=0.01)

    def test_unknown_name_returns_none(self, size_table):
        """Test that unknown names return None rather than a default."""
        assert size_table.lookup("A9000") is None

    def test_lookup_does_not_trim(self, size_table):
        """Test that surrounding whitespace is not stripped."""
        assert size_table.lookup(" A4") is None
        assert size_table.lookup("A4 ") is None

    def test_get_raises_for_unknown(self, size_table):
        """Test the raising lookup variant."""
        with pytest.raises(UnknownPageSizeError) as exc_info:
            size_table.get("A9000")

        assert exc_info.value.name == "A9000"

    def test_contains(self, size_table):
        """Test membership checks."""
        assert "legal" in size_table
        assert "A9000" not in size_table
        assert 42 not in size_table

    def test_series_present(self, size_table):
        """Test that the ISO series and US sizes are all present."""
        for series in ("A", "B", "C", "JIS_B"):
            for i in range(11):
                assert f"{series}{i}" in size_table
        for name in ("LEGAL", "TABLOID", "LEDGER", "EXECUTIVE", "ANSI_E", "ARCH_D"):
            assert name in size_table

    def test_names_order_is_stable(self, size_table):
        """Test that enumeration order is insertion order."""
        names = size_table.names()

        assert names[0] == "LETTER"
        assert names == PageSizeTable.default().names()
        assert len(names) == len(size_table)
        assert [size.name for size in size_table] == names


class TestPageSizeTableConstruction:
    """Tests for building and extending tables."""

    def test_duplicate_names_rejected(self):
        """Test that duplicate names raise."""
        sizes = [PageSize("LETTER", 612, 792), PageSize("letter", 612, 792)]

        with pytest.raises(InvalidConfigError, match="Duplicate"):
            PageSizeTable(sizes)

    def test_missing_default_rejected(self):
        """Test that the default entry must be present."""
        with pytest.raises(InvalidConfigError, match="Default page size"):
            PageSizeTable([PageSize("A4", 595, 842)])

    def test_with_sizes_returns_new_table(self, size_table):
        """Test that custom sizes extend a copy of the table."""
        extended = size_table.with_sizes({"postcard": {"width": 100, "height": 148, "unit": "mm"}})

        assert extended.lookup("POSTCARD") is not None
        assert extended.lookup("postcard").width == pytest.approx(283.46, abs=0.01)
        assert size_table.lookup("POSTCARD") is None

    def test_with_sizes_defaults_to_points(self, size_table):
        """Test that custom sizes without a unit are in points."""
        extended = size_table.with_sizes({"BANNER": {"width": 300, "height": 900}})

        assert extended.get("banner") == PageSize("BANNER", 300.0, 900.0)

    def test_with_sizes_requires_dimensions(self, size_table):
        """Test that incomplete custom entries raise."""
        with pytest.raises(InvalidConfigError, match="needs 'width' and 'height'"):
            size_table.with_sizes({"BROKEN": {"width": 300}})


class TestFormatColumns:
    """Tests for usage formatting."""

    def test_four_names_per_row(self, size_table):
        """Test that names are laid out four per line."""
        lines = size_table.format_columns().splitlines()

        assert lines[0].split() == size_table.names()[:4]
        assert len(lines) == -(-len(size_table) // 4)

    def test_every_name_listed(self, size_table):
        """Test that every name appears in the output."""
        listed = size_table.format_columns().split()

        assert listed == size_table.names()
