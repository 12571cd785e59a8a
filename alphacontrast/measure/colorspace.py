# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
sRGB linearization and relative luminance.

Conversion chain: sRGB → Linear RGB → Relative luminance (Y)

References:
- WCAG 2.0 relative luminance:
  https://www.w3.org/TR/WCAG20/#relativeluminancedef

All conversions are pure NumPy and accept a single color of shape (3,) or a
batch of shape (..., 3).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import numpy as np
from numpy.typing import ArrayLike, NDArray


# WCAG 2.0 linearization breakpoint. The IEC sRGB standard uses 0.04045;
# no 8-bit channel falls between the two, so results only differ for
# non-quantized input.
WCAG_LINEAR_THRESHOLD = 0.03928

# Rec. 709 luminance weights for linear R, G, B
LUMINANCE_COEFFICIENTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


# =============================================================================
# sRGB → Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    WCAG 2.0 piecewise gamma curve:
    - For values <= 0.03928: value/12.92
    - For values > 0.03928: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Clip before the power so the unused branch never sees a negative base
    high = np.power(np.maximum(srgb + 0.055, 0.0) / 1.055, 2.4)
    return np.where(srgb <= WCAG_LINEAR_THRESHOLD, srgb / 12.92, high)


# =============================================================================
# Relative luminance
# =============================================================================


def relative_luminance(srgb: ArrayLike) -> NDArray[np.float64] | float:
    """
    WCAG relative luminance of sRGB colors.

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Luminance in [0, 1]. A float for a single color, otherwise an array
        of shape (...).
    """
    linear = srgb_to_linear(srgb)
    if linear.shape[-1:] != (3,):
        raise ValueError(f"Expected shape (..., 3), got {linear.shape}")
    lum = linear @ LUMINANCE_COEFFICIENTS
    if lum.ndim == 0:
        return float(lum)
    return lum


def srgb_uint8_to_luminance(pixels: ArrayLike) -> NDArray[np.float64] | float:
    """
    Relative luminance of uint8 sRGB pixels [0,255].

    Convenience wrapper for 8-bit colors.
    """
    srgb_float = np.asarray(pixels, dtype=np.float64) / 255.0
    return relative_luminance(srgb_float)


# =============================================================================
# Rounding
# =============================================================================


def round_half_away(values: ArrayLike) -> NDArray[np.float64]:
    """
    Round to the nearest integer, ties away from zero.

    np.round rounds ties to even (127.5 → 128 but 126.5 → 126); color tools
    conventionally round 126.5 up to 127.
    """
    values = np.asarray(values, dtype=np.float64)
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def round_ratio(ratio: float, decimals: int = 1) -> float:
    """
    Round a contrast ratio to a fixed number of decimals, ties away from zero.

    Rounds the exact binary value of ``ratio``, so 6.949999999999999 gives
    6.9 rather than 7.0.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(ratio).quantize(quantum, rounding=ROUND_HALF_UP))
