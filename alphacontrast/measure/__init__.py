# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Contrast core for alphacontrast.

Compositing, luminance and classification. Every function here is pure:
no I/O and no shared state.
"""

from alphacontrast.measure.composite import composite, composite_pair
from alphacontrast.measure.contrast import (
    classify,
    compute_contrast,
    contrast_ratio,
    evaluate,
)

__all__ = [
    "composite",
    "composite_pair",
    "contrast_ratio",
    "classify",
    "evaluate",
    "compute_contrast",
]
