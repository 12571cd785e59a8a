# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (message, tool)."""

import json

import pytest

from alphacontrast import Color, ContrastConfig, LayerSample, TextContext, evaluate
from alphacontrast.runtime import SerializerFormat, to_message, to_tool_output
from alphacontrast.runtime.serializers import format_ratio
from alphacontrast.runtime.serializers.tool import TOOL_NAME

WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


@pytest.fixture
def max_contrast():
    return evaluate(LayerSample(WHITE), LayerSample(BLACK))


@pytest.fixture
def large_text_pass():
    return evaluate(
        LayerSample(WHITE), LayerSample(BLACK, alpha=0.5), TextContext(24)
    )


class TestMessage:

    def test_aaa(self, max_contrast):
        assert to_message(max_contrast) == "✅ AAA passed  21.0:1"

    def test_large_text(self, large_text_pass):
        assert to_message(large_text_pass) == (
            "⚠️ AA passed (large or bold/medium text)  3.9:1"
        )

    def test_format_ratio(self):
        assert format_ratio(4.5) == "4.5:1"
        assert format_ratio(5.317, decimals=2) == "5.32:1"


class TestToolOutput:

    def test_full_json(self, max_contrast):
        data = json.loads(to_tool_output(max_contrast))
        assert data["tool"] == TOOL_NAME
        assert data["ratio"] == 21.0
        assert data["classification"] == "AAA_Passed"
        assert data["display"] == "21.0:1"
        assert data["composites"]["fg_over_bg"]["hex"] == "#000000"
        assert "luminances" in data

    def test_compact(self, large_text_pass):
        data = json.loads(to_tool_output(large_text_pass, compact=True))
        assert set(data) == {
            "tool", "ratio", "classification", "passed", "display", "message",
        }
        assert data["classification"] == "AA_Passed_Large"
        assert data["passed"] is True

    def test_pair_id(self, max_contrast):
        data = json.loads(to_tool_output(max_contrast, pair_id="body-text"))
        assert data["pair_id"] == "body-text"

    def test_pretty(self, max_contrast):
        out = to_tool_output(max_contrast, format=SerializerFormat.JSON_PRETTY)
        assert "\n" in out
        assert json.loads(out)["ratio"] == 21.0

    def test_compact_json_has_no_spaces_between_items(self, max_contrast):
        out = to_tool_output(max_contrast, compact=True)
        assert '","' in out or '":' in out
        assert ", " not in out

    def test_message_format(self, max_contrast):
        out = to_tool_output(max_contrast, format=SerializerFormat.MESSAGE)
        assert out == "✅ AAA passed  21.0:1"


class TestDisplayPrecision:

    @pytest.fixture
    def two_decimals(self):
        return evaluate(
            LayerSample(BLACK), LayerSample(WHITE, alpha=0.5),
            config=ContrastConfig(ratio_decimals=2),
        )

    def test_message_follows_ratio_precision(self, two_decimals):
        assert two_decimals.ratio == pytest.approx(5.32)
        assert to_message(two_decimals) == "✅ AA passed  5.32:1"

    def test_display_matches_ratio(self, two_decimals):
        data = json.loads(to_tool_output(two_decimals))
        assert data["ratio"] == pytest.approx(5.32)
        assert data["display"] == "5.32:1"
        assert data["message"].endswith("5.32:1")

    def test_explicit_decimals_override(self, two_decimals):
        assert to_message(two_decimals, decimals=1) == "✅ AA passed  5.3:1"
