# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""Tests for schema types and their validation."""

import json

import pytest

from alphacontrast.errors import ContrastError, InvalidColorInput, InvalidTextContext
from alphacontrast.schema import (
    Classification,
    Color,
    ContrastResult,
    LayerSample,
    Luminances,
    TextContext,
)


class TestColor:

    def test_valid_color(self):
        c = Color(0.1, 0.2, 0.3)
        assert c.channels == (0.1, 0.2, 0.3)

    def test_channel_out_of_range(self):
        with pytest.raises(InvalidColorInput, match="g must be 0-1"):
            Color(0.5, 1.5, 0.5)

    def test_non_numeric_channel(self):
        with pytest.raises(InvalidColorInput, match="must be a number"):
            Color("red", 0.0, 0.0)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Color(-0.1, 0.0, 0.0)
        assert issubclass(InvalidColorInput, ContrastError)

    def test_from_hex(self):
        c = Color.from_hex("#3366CC")
        assert c.to_uint8() == (0x33, 0x66, 0xCC)
        assert c.hex == "#3366CC"

    def test_from_hex_without_hash_and_shorthand(self):
        assert Color.from_hex("ffffff") == Color(1.0, 1.0, 1.0)
        assert Color.from_hex("#fff") == Color(1.0, 1.0, 1.0)

    def test_from_hex_invalid(self):
        with pytest.raises(InvalidColorInput, match="Not a hex color"):
            Color.from_hex("#12345")

    def test_from_uint8_range(self):
        with pytest.raises(InvalidColorInput, match="0-255"):
            Color.from_uint8(256, 0, 0)

    def test_from_dict_forms(self):
        expected = Color(1.0, 0.0, 0.0)
        assert Color.from_dict({"r": 1.0, "g": 0.0, "b": 0.0}) == expected
        assert Color.from_dict([1.0, 0.0, 0.0]) == expected
        assert Color.from_dict("#FF0000") == expected

    def test_from_dict_wrong_length(self):
        with pytest.raises(InvalidColorInput, match="exactly 3"):
            Color.from_dict([1.0, 0.0])

    def test_to_dict_with_hex(self):
        d = Color(0.0, 0.0, 0.0).to_dict(include_hex=True)
        assert d == {"r": 0.0, "g": 0.0, "b": 0.0, "hex": "#000000"}

    def test_frozen(self):
        c = Color(0.1, 0.2, 0.3)
        with pytest.raises(AttributeError):
            c.r = 0.5


class TestLayerSample:

    def test_from_layer_multiplies_alpha_and_opacity(self):
        s = LayerSample.from_layer(Color(0, 0, 0), color_alpha=0.5, opacity=0.5)
        assert s.alpha == pytest.approx(0.25)
        assert not s.is_opaque

    def test_invalid_opacity(self):
        with pytest.raises(InvalidColorInput, match="opacity"):
            LayerSample.from_layer(Color(0, 0, 0), opacity=2.0)

    def test_requires_color(self):
        with pytest.raises(InvalidColorInput, match="Expected Color"):
            LayerSample(color=(0, 0, 0))

    def test_dict_roundtrip(self):
        s = LayerSample(Color(0.2, 0.4, 0.6), alpha=0.7)
        assert LayerSample.from_dict(s.to_dict()) == s


class TestTextContext:

    def test_large_above_18pt(self):
        assert TextContext(18.5).is_large_or_heavy
        assert not TextContext(18).is_large_or_heavy

    def test_heavy_from_14pt(self):
        assert TextContext(14, heavy=True).is_large_or_heavy
        assert not TextContext(13.9, heavy=True).is_large_or_heavy

    def test_from_font_bold(self):
        assert TextContext.from_font(16, "Helvetica-Bold").heavy
        assert TextContext.from_font(16, "Roboto-Medium").heavy
        assert not TextContext.from_font(16, "Roboto-Regular").heavy
        assert not TextContext.from_font(16, "").heavy

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError, match="Font size"):
            TextContext(-1)

    def test_from_dict_requires_size(self):
        with pytest.raises(InvalidTextContext, match="font size"):
            TextContext.from_dict({"heavy": True})

    def test_string_heavy_rejected(self):
        """The string "false" is truthy, so only real bools are accepted."""
        with pytest.raises(InvalidTextContext, match="heavy must be a bool"):
            TextContext(14, heavy="false")

    def test_non_numeric_size_rejected(self):
        with pytest.raises(InvalidTextContext, match="must be a number"):
            TextContext("large")
        with pytest.raises(InvalidTextContext, match="must be a number"):
            TextContext(None)

    def test_text_errors_are_contrast_errors(self):
        assert issubclass(InvalidTextContext, ContrastError)
        with pytest.raises(ContrastError):
            TextContext(float("inf"))


class TestClassification:

    def test_values(self):
        assert {c.value for c in Classification} == {
            "AA_Failed", "AA_Passed", "AA_Passed_Large",
            "AAA_Passed", "AAA_Passed_Large",
        }

    def test_labels(self):
        assert Classification.AA_FAILED.label == "❌ AA Failed"
        assert Classification.AAA_PASSED.label == "✅ AAA passed"
        assert "large or bold/medium" in Classification.AA_PASSED_LARGE.label

    def test_passed(self):
        assert not Classification.AA_FAILED.passed
        assert Classification.AA_PASSED_LARGE.passed


def _result(ratio, classification=Classification.AA_PASSED):
    return ContrastResult(
        ratio=ratio,
        classification=classification,
        composite_fg_over_bg=Color(0, 0, 0),
        composite_bg_over_fg=Color(1, 1, 1),
        luminances=Luminances(1.0, 0.0, 0.0, 1.0),
    )


class TestContrastResult:

    def test_ratio_below_one_rejected(self):
        with pytest.raises(ValueError, match=">= 1.0"):
            _result(0.9)

    def test_to_dict(self):
        d = _result(21.0, Classification.AAA_PASSED).to_dict()
        assert d["ratio"] == 21.0
        assert d["classification"] == "AAA_Passed"
        assert d["passed"] is True
        assert d["composites"]["fg_over_bg"]["hex"] == "#000000"
        assert d["luminances"]["bg_over_fg"] == 1.0
        assert d["text"] is None

    def test_to_json_compact(self):
        s = _result(21.0).to_json()
        assert ", " not in s
        assert json.loads(s)["ratio"] == 21.0

    def test_message(self):
        assert _result(21.0, Classification.AAA_PASSED).message == "✅ AAA passed  21.0:1"
