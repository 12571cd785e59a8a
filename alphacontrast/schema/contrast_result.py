# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Value types for contrast evaluation.

Design principles:
- Immutable: All types are frozen dataclasses
- Validated: Out-of-range input fails at construction, not deep in the math
- Serializable: JSON-ready for tool output

Channel values are sRGB in [0, 1]. Alpha is never stored on a Color; it
travels alongside it in a LayerSample.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from alphacontrast.errors import InvalidColorInput, InvalidTextContext


# =============================================================================
# Parsing Helpers
# =============================================================================

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _check_unit(name: str, value: float) -> float:
    """Return value as float, raising InvalidColorInput unless it is in [0, 1]."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidColorInput(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise InvalidColorInput(f"{name} must be 0-1, got {value}")
    return value


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    An opaque sRGB color.

    Attributes:
        r: Red channel (0.0-1.0)
        g: Green channel (0.0-1.0)
        b: Blue channel (0.0-1.0)
    """
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        """Validate channels are within [0, 1]."""
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _check_unit(name, getattr(self, name)))

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """Hex string like "#3941C8"."""
        r, g, b = self.to_uint8()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_uint8(self) -> tuple[int, int, int]:
        """Channels on the 0-255 scale, rounded half away from zero."""
        from alphacontrast.measure.colorspace import round_half_away
        r, g, b = round_half_away([c * 255.0 for c in self.channels])
        return int(r), int(g), int(b)

    @classmethod
    def from_uint8(cls, r: int, g: int, b: int) -> Color:
        """Build a Color from 0-255 channel values."""
        for name, value in (("r", r), ("g", g), ("b", b)):
            if not 0 <= value <= 255:
                raise InvalidColorInput(f"{name} must be 0-255, got {value}")
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """
        Parse "#RRGGBB", "RRGGBB" or the "#RGB" shorthand.

        Raises:
            InvalidColorInput: If the string is not a hex color.
        """
        m = _HEX_RE.match(hex_color.strip())
        if not m:
            raise InvalidColorInput(f"Not a hex color: {hex_color!r}")
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls.from_uint8(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16),
        )

    def to_dict(self, include_hex: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_hex: If True, include the hex value
        """
        d = {"r": self.r, "g": self.g, "b": self.b}
        if include_hex:
            d["hex"] = self.hex
        return d

    @classmethod
    def from_dict(cls, data: Union[dict, list, tuple, str]) -> Color:
        """Deserialize from a dict, an [r, g, b] sequence, or a hex string."""
        if isinstance(data, str):
            return cls.from_hex(data)
        if isinstance(data, dict):
            try:
                return cls(r=data["r"], g=data["g"], b=data["b"])
            except KeyError as e:
                raise InvalidColorInput(f"Color is missing channel {e}") from None
        if data is None or len(data) != 3:
            raise InvalidColorInput(f"Color needs exactly 3 channels, got {data!r}")
        return cls(*data)


@dataclass(frozen=True, slots=True)
class LayerSample:
    """
    A color with the effective alpha it is drawn at.

    Attributes:
        color: The sampled color
        alpha: Effective alpha (0.0-1.0), the color's own alpha times the
            opacity of the layer that holds it
    """
    color: Color
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Validate alpha is in range."""
        if not isinstance(self.color, Color):
            raise InvalidColorInput(f"Expected Color, got {type(self.color).__name__}")
        object.__setattr__(self, "alpha", _check_unit("alpha", self.alpha))

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    @classmethod
    def from_layer(
        cls,
        color: Color,
        color_alpha: float = 1.0,
        opacity: float = 1.0,
    ) -> LayerSample:
        """Combine a color's alpha channel with its layer's opacity."""
        color_alpha = _check_unit("color alpha", color_alpha)
        opacity = _check_unit("opacity", opacity)
        return cls(color=color, alpha=color_alpha * opacity)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": self.color.to_dict(include_hex=True), "alpha": self.alpha}

    @classmethod
    def from_dict(cls, data: dict) -> LayerSample:
        """
        Deserialize from dictionary.

        Accepts "alpha", "effective_alpha" or "effectiveAlpha" for the alpha
        key; alpha defaults to 1.0.
        """
        if "color" not in data or data["color"] is None:
            raise InvalidColorInput("Layer sample has no color")
        alpha = 1.0
        for key in ("alpha", "effective_alpha", "effectiveAlpha"):
            if key in data:
                alpha = data[key]
                break
        return cls(color=Color.from_dict(data["color"]), alpha=alpha)


# =============================================================================
# Text Context
# =============================================================================

# Font name fragments that mark a heavy weight
HEAVY_WEIGHT_MARKERS = ("Bold", "Medium")

LARGE_TEXT_PT = 18.0
HEAVY_TEXT_PT = 14.0


@dataclass(frozen=True, slots=True)
class TextContext:
    """
    Metrics of the text being checked.

    Attributes:
        font_size_pt: Font size in points (>= 0)
        heavy: True for bold or medium weights
    """
    font_size_pt: float
    heavy: bool = False

    def __post_init__(self) -> None:
        """Validate font size and heavy flag."""
        if isinstance(self.font_size_pt, bool):
            raise InvalidTextContext(f"Font size must be a number, got {self.font_size_pt!r}")
        try:
            size = float(self.font_size_pt)
        except (TypeError, ValueError):
            raise InvalidTextContext(
                f"Font size must be a number, got {self.font_size_pt!r}"
            ) from None
        if not math.isfinite(size) or size < 0.0:
            raise InvalidTextContext(f"Font size must be >= 0, got {self.font_size_pt}")
        # "false" would be truthy under bool()
        if not isinstance(self.heavy, bool):
            raise InvalidTextContext(f"heavy must be a bool, got {self.heavy!r}")
        object.__setattr__(self, "font_size_pt", size)

    @property
    def is_large_or_heavy(self) -> bool:
        """Large (> 18pt) or heavy text at 14pt and above."""
        return self.font_size_pt > LARGE_TEXT_PT or (
            self.font_size_pt >= HEAVY_TEXT_PT and self.heavy
        )

    @classmethod
    def from_font(cls, font_size: float, postscript_name: str = "") -> TextContext:
        """Derive the heavy flag from a PostScript font name like "Inter-Bold"."""
        name = postscript_name or ""
        heavy = any(marker in name for marker in HEAVY_WEIGHT_MARKERS)
        return cls(font_size_pt=font_size, heavy=heavy)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"font_size_pt": self.font_size_pt, "heavy": self.heavy}

    @classmethod
    def from_dict(cls, data: dict) -> TextContext:
        """Deserialize from dictionary (snake_case or camelCase keys)."""
        size = data.get("font_size_pt", data.get("fontSizePt"))
        if size is None:
            raise InvalidTextContext("Text context needs a font size")
        return cls(font_size_pt=size, heavy=data.get("heavy", False))


# =============================================================================
# Classification
# =============================================================================


class Classification(Enum):
    """
    WCAG 2.0 conformance outcome.

    The *_LARGE members apply to large or bold/medium text, where the
    thresholds drop to 3.0 (AA) and 4.5 (AAA).
    """
    AA_FAILED = "AA_Failed"
    AA_PASSED_LARGE = "AA_Passed_Large"
    AA_PASSED = "AA_Passed"
    AAA_PASSED_LARGE = "AAA_Passed_Large"
    AAA_PASSED = "AAA_Passed"

    @property
    def label(self) -> str:
        """User-facing text for this outcome."""
        return _CLASSIFICATION_LABELS[self]

    @property
    def passed(self) -> bool:
        return self is not Classification.AA_FAILED


_CLASSIFICATION_LABELS = {
    Classification.AA_FAILED: "❌ AA Failed",
    Classification.AA_PASSED_LARGE: "⚠️ AA passed (large or bold/medium text)",
    Classification.AA_PASSED: "✅ AA passed",
    Classification.AAA_PASSED_LARGE: "⚠️ AAA passed (large or bold/medium text)",
    Classification.AAA_PASSED: "✅ AAA passed",
}


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class ContrastConfig:
    """Configuration for contrast evaluation."""

    # Round composited channels to whole 0-255 values before the luminance
    # pass. Keeps results identical to earlier outputs; disable for full
    # floating-point precision.
    round_composites: bool = True

    # Decimal places kept on the reported ratio (classification uses the
    # rounded value)
    ratio_decimals: int = 1

    def __post_init__(self) -> None:
        if self.ratio_decimals < 0:
            raise ValueError(f"ratio_decimals must be >= 0, got {self.ratio_decimals}")


# =============================================================================
# Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class Luminances:
    """
    Relative luminance of the four colors involved in one evaluation.

    Attributes:
        background: Background color as given (alpha ignored)
        foreground: Foreground color as given (alpha ignored)
        fg_over_bg: Foreground composited over background
        bg_over_fg: Background composited over foreground
    """
    background: float
    foreground: float
    fg_over_bg: float
    bg_over_fg: float

    @property
    def lighter(self) -> float:
        """Lighter of the two composited luminances."""
        return max(self.fg_over_bg, self.bg_over_fg)

    @property
    def darker(self) -> float:
        """Darker of the two composited luminances."""
        return min(self.fg_over_bg, self.bg_over_fg)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "background": self.background,
            "foreground": self.foreground,
            "fg_over_bg": self.fg_over_bg,
            "bg_over_fg": self.bg_over_fg,
        }


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """
    Outcome of a single contrast evaluation.

    Attributes:
        ratio: Contrast ratio (>= 1.0), rounded for display
        classification: AA/AAA outcome derived from the rounded ratio
        composite_fg_over_bg: Apparent foreground color
        composite_bg_over_fg: Apparent background color
        luminances: Luminance of every color that went into the ratio
        text: Text metrics used for classification, if any
        decimals: Decimal places the ratio was rounded to, used for display
    """
    ratio: float
    classification: Classification
    composite_fg_over_bg: Color
    composite_bg_over_fg: Color
    luminances: Luminances
    text: Optional[TextContext] = None
    decimals: int = 1

    def __post_init__(self) -> None:
        """Validate the ratio."""
        if not self.ratio >= 1.0:
            raise ValueError(f"Contrast ratio must be >= 1.0, got {self.ratio}")

    @property
    def passed(self) -> bool:
        """True unless the pair fails AA."""
        return self.classification.passed

    @property
    def message(self) -> str:
        """User-facing summary like "✅ AA passed  4.6:1"."""
        from alphacontrast.runtime.serializers.message import to_message
        return to_message(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "ratio": self.ratio,
            "classification": self.classification.value,
            "passed": self.passed,
            "composites": {
                "fg_over_bg": self.composite_fg_over_bg.to_dict(include_hex=True),
                "bg_over_fg": self.composite_bg_over_fg.to_dict(include_hex=True),
            },
            "luminances": self.luminances.to_dict(),
            "text": self.text.to_dict() if self.text is not None else None,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to a JSON string."""
        if indent is None:
            return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
