# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Alphacontrast -- WCAG 2.0 contrast checking for translucent colors.

Composites two colors with independent opacity over each other, computes
the WCAG contrast ratio of the apparent colors, and classifies it against
the AA/AAA thresholds.

Quick start::

    from alphacontrast import compute_contrast

    r = compute_contrast(
        {"color": [1, 1, 1], "alpha": 1.0},
        {"color": [0, 0, 0], "alpha": 0.6},
        {"font_size_pt": 12, "heavy": False},
    )
    r.ratio            # 5.7
    r.classification   # Classification.AA_PASSED
    r.message          # "✅ AA passed  5.7:1"
"""

from __future__ import annotations

__version__ = "1.0.0"

from alphacontrast.errors import (
    ContrastError,
    InvalidColorInput,
    InvalidSelection,
    InvalidTextContext,
)
from alphacontrast.measure import compute_contrast, evaluate
from alphacontrast.schema import (
    Classification,
    Color,
    ContrastConfig,
    ContrastResult,
    LayerSample,
    TextContext,
)

__all__ = [
    # Core API
    "compute_contrast",
    "evaluate",
    "ContrastResult",
    # Types (commonly needed)
    "Color",
    "LayerSample",
    "TextContext",
    "Classification",
    "ContrastConfig",
    # Errors
    "ContrastError",
    "InvalidColorInput",
    "InvalidSelection",
    "InvalidTextContext",
    # Version
    "__version__",
]
