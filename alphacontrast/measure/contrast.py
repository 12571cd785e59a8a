# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
WCAG 2.0 contrast ratio and AA/AAA classification.

References:
- Contrast ratio: https://www.w3.org/TR/WCAG20/#contrast-ratiodef
- Success criteria 1.4.3 (AA) and 1.4.6 (AAA)

Only the two composited (apparent) colors enter the ratio. The luminances of
the colors as given are reported alongside for inspection.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

import numpy as np

from alphacontrast.schema import (
    Classification,
    ContrastConfig,
    ContrastResult,
    LayerSample,
    Luminances,
    TextContext,
)
from alphacontrast.measure.colorspace import relative_luminance, round_ratio
from alphacontrast.measure.composite import composite_pair

log = logging.getLogger(__name__)

# WCAG 2.0 thresholds
AA_RATIO = 4.5
AA_LARGE_RATIO = 3.0
AAA_RATIO = 7.0
AAA_LARGE_RATIO = 4.5

_DEFAULT_CONFIG = ContrastConfig()


def contrast_ratio(luminance_a: float, luminance_b: float) -> float:
    """
    Unrounded contrast ratio of two luminances, lighter over darker.

    Either argument order gives the same result, always >= 1.0.
    """
    lighter, darker = luminance_a, luminance_b
    if lighter <= darker:
        lighter, darker = darker, lighter
    return (lighter + 0.05) / (darker + 0.05)


def classify(ratio: float, text: Optional[TextContext] = None) -> Classification:
    """
    Classify a contrast ratio against the AA/AAA thresholds.

    Rules are applied in order and the last one that matches wins, so a
    ratio of exactly 4.5 on large or heavy text is AAA_PASSED_LARGE rather
    than AA_PASSED.

    Args:
        ratio: Contrast ratio, normally already rounded for display
        text: Text metrics; None means the element is not text

    Returns:
        The strongest matching Classification.
    """
    large = text is not None and text.is_large_or_heavy

    result = Classification.AA_FAILED
    if large and ratio >= AA_LARGE_RATIO:
        result = Classification.AA_PASSED_LARGE
    if ratio >= AA_RATIO:
        result = Classification.AA_PASSED
    if large and ratio >= AAA_LARGE_RATIO:
        result = Classification.AAA_PASSED_LARGE
    if ratio >= AAA_RATIO:
        result = Classification.AAA_PASSED
    return result


def evaluate(
    background: LayerSample,
    foreground: LayerSample,
    text: Optional[TextContext] = None,
    *,
    config: Optional[ContrastConfig] = None,
) -> ContrastResult:
    """
    Compute the contrast ratio of two translucent colors and classify it.

    Steps:
    1. Composite foreground over background and background over foreground.
    2. Take the relative luminance of the given and composited colors.
    3. Ratio of the lighter composite over the darker one, rounded.
    4. Classify the rounded ratio, adjusted for large or heavy text.

    Args:
        background: Background color and effective alpha
        foreground: Foreground color and effective alpha
        text: Text metrics of the checked element, if it is text
        config: Evaluation settings (uses defaults if None)

    Returns:
        ContrastResult with the ratio, classification, and intermediates.
    """
    if config is None:
        config = _DEFAULT_CONFIG

    fg_over_bg, bg_over_fg = composite_pair(
        background, foreground, quantize=config.round_composites
    )

    l1, l2, l3, l4 = relative_luminance(np.array([
        background.color.channels,
        foreground.color.channels,
        fg_over_bg.channels,
        bg_over_fg.channels,
    ]))
    luminances = Luminances(
        background=float(l1),
        foreground=float(l2),
        fg_over_bg=float(l3),
        bg_over_fg=float(l4),
    )

    raw_ratio = contrast_ratio(luminances.fg_over_bg, luminances.bg_over_fg)
    ratio = round_ratio(raw_ratio, config.ratio_decimals)
    classification = classify(ratio, text)

    log.debug(
        "contrast %s@%.3f over %s@%.3f: L=%s ratio=%.4f -> %s",
        foreground.color.hex, foreground.alpha,
        background.color.hex, background.alpha,
        luminances.to_dict(), raw_ratio, classification.value,
    )

    return ContrastResult(
        ratio=ratio,
        classification=classification,
        composite_fg_over_bg=fg_over_bg,
        composite_bg_over_fg=bg_over_fg,
        luminances=luminances,
        text=text,
        decimals=config.ratio_decimals,
    )


SampleLike = Union[LayerSample, Mapping]
TextLike = Union[TextContext, Mapping, None]


def compute_contrast(
    background: SampleLike,
    foreground: SampleLike,
    text_context: TextLike = None,
    *,
    config: Optional[ContrastConfig] = None,
) -> ContrastResult:
    """
    Contrast check entry point.

    Accepts schema objects or plain mappings, so a host can pass
    ``{"color": [r, g, b], "alpha": a}`` and
    ``{"font_size_pt": 18, "heavy": True}`` directly.

    Raises:
        InvalidColorInput: If a color or alpha is missing or outside [0, 1].
        InvalidTextContext: If the font size or heavy flag is malformed.
    """
    if not isinstance(background, LayerSample):
        background = LayerSample.from_dict(background)
    if not isinstance(foreground, LayerSample):
        foreground = LayerSample.from_dict(foreground)
    if text_context is not None and not isinstance(text_context, TextContext):
        text_context = TextContext.from_dict(text_context)
    return evaluate(background, foreground, text_context, config=config)
