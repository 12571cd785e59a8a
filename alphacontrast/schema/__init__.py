# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Schema definitions for contrast evaluation.

All types in this module are immutable (frozen dataclasses) and validate
their inputs on construction.
"""

from alphacontrast.schema.contrast_result import (
    HEAVY_WEIGHT_MARKERS,
    Classification,
    Color,
    ContrastConfig,
    ContrastResult,
    LayerSample,
    Luminances,
    TextContext,
)

__all__ = [
    # Inputs
    "Color",
    "LayerSample",
    "TextContext",
    "HEAVY_WEIGHT_MARKERS",
    # Configuration
    "ContrastConfig",
    # Outputs
    "Classification",
    "Luminances",
    "ContrastResult",
]
