# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Alpha compositing of two colors.

A translucent color rgba(R1, G1, B1, A1) drawn over a solid rgb(R2, G2, B2)
appears as rgb(R1·A1 + R2·(1-A1), ...). Neither layer in a contrast check is
assumed opaque, so both directions are computed.

Reference: https://en.wikipedia.org/wiki/Alpha_compositing#Alpha_blending
"""

from __future__ import annotations

import numpy as np

from alphacontrast.schema import Color, LayerSample
from alphacontrast.measure.colorspace import round_half_away


def composite(
    top: Color,
    top_alpha: float,
    bottom: Color,
    *,
    quantize: bool = True,
) -> Color:
    """
    Blend ``top`` at ``top_alpha`` over an opaque ``bottom``.

    The blend is done on the 0-255 scale. With ``quantize`` each channel is
    rounded to a whole value (ties away from zero) before being mapped back
    to [0, 1], matching what an 8-bit renderer would produce.

    Args:
        top: Color drawn on top
        top_alpha: Effective alpha of ``top`` (0.0-1.0)
        bottom: Color underneath
        quantize: Round channels to 8-bit values

    Returns:
        The apparent, opaque color.
    """
    top255 = np.array(top.channels, dtype=np.float64) * 255.0
    bottom255 = np.array(bottom.channels, dtype=np.float64) * 255.0

    blended = top255 * top_alpha + bottom255 * (1.0 - top_alpha)
    if quantize:
        blended = round_half_away(blended)

    # Float error can push an exact 255 blend a hair past 1.0
    r, g, b = np.clip(blended / 255.0, 0.0, 1.0)
    return Color(float(r), float(g), float(b))


def composite_pair(
    background: LayerSample,
    foreground: LayerSample,
    *,
    quantize: bool = True,
) -> tuple[Color, Color]:
    """
    Composite each sample over the other.

    Returns:
        (foreground over background, background over foreground)
    """
    fg_over_bg = composite(
        foreground.color, foreground.alpha, background.color, quantize=quantize
    )
    bg_over_fg = composite(
        background.color, background.alpha, foreground.color, quantize=quantize
    )
    return fg_over_bg, bg_over_fg
