"""Tests for eqpyramid.ui.colors – color blending and constants."""

from __future__ import annotations

import pytest

from eqpyramid.ui.colors import BoardColors, blend_hex


# ===========================================================================
# BoardColors – constants exist
# ===========================================================================

class TestBoardColors:
    @pytest.mark.parametrize("name", ["BG_TOP", "CELL", "CELL_SELECTED", "TARGET", "CORRECT", "INCORRECT"])
    def test_is_hex(self, name: str):
        value = getattr(BoardColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_panel_bg_is_rgba(self):
        assert BoardColors.PANEL_BG.startswith("rgba(")


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        r = int(result[1:3], 16)
        assert 126 <= r <= 128

    def test_t_clamped(self):
        assert blend_hex("#000000", "#FFFFFF", 2.0) == "#FFFFFF"
        assert blend_hex("#000000", "#FFFFFF", -1.0) == "#000000"

    def test_invalid_input_returns_a(self):
        assert blend_hex("red", "#FFFFFF", 0.5) == "red"

    def test_bad_hex_digits_return_a(self):
        assert blend_hex("#GGGGGG", "#FFFFFF", 0.5) == "#GGGGGG"
