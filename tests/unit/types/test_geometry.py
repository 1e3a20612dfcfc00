"""Tests for Rect, Matrix and PDF number formatting."""

from __future__ import annotations

import pytest

from pagefit.misc import format_number
from pagefit.types import Matrix, Rect


class TestRect:
    """Tests for Rect."""

    def test_from_size(self):
        """Test an origin-anchored rectangle."""
        rect = Rect.from_size(612, 792)

        assert (rect.width, rect.height) == (612, 792)
        assert rect.is_origin_anchored

    def test_offset_rect(self):
        """Test width and height of a rectangle away from the origin."""
        rect = Rect(100, 50, 712, 842)

        assert (rect.width, rect.height) == (612, 792)
        assert not rect.is_origin_anchored

    def test_to_pdf(self):
        """Test PDF array formatting."""
        assert Rect.from_size(612.0, 792.0).to_pdf() == "[0 0 612 792]"
        assert Rect(0, 0, 595.2756, 841.8898).to_pdf() == "[0 0 595.2756 841.8898]"


class TestMatrix:
    """Tests for Matrix."""

    def test_identity(self):
        """Test the identity matrix."""
        assert Matrix.identity() == Matrix(1, 0, 0, 1, 0, 0)
        assert Matrix.identity().to_tuple() == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def test_translate(self):
        """Test that translate only sets the offset terms."""
        assert Matrix.translate(10, 20) == Matrix(1, 0, 0, 1, 10, 20)

    def test_to_pdf(self):
        """Test cm operator formatting."""
        assert Matrix(0.792, 0, 0, 0.792, 0, 108).to_pdf() == "0.792 0 0 0.792 0 108 cm"
        assert Matrix.translate(-100, -50).to_pdf() == "1 0 0 1 -100 -50 cm"


class TestFormatNumber:
    """Tests for PDF number formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (612.0, "612"),
            (0.792, "0.792"),
            (-0.0, "0"),
            (0.0, "0"),
            (108.00000000001, "108"),
            (-12.5, "-12.5"),
            (1e-9, "0"),
        ],
    )
    def test_format(self, value, expected):
        """Test trimming of trailing zeros and rounding noise."""
        assert format_number(value) == expected
