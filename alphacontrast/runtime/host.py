# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Host boundary: design layers and selections.

A host (design tool plugin, test harness, CLI) describes what the user
selected with these types. Layers are a tagged variant, text or shape,
resolved to a LayerSample and optional TextContext before the contrast core
runs. The core never inspects layers itself.

Selection rules:
- One layer: checked against the artboard background.
- Two layers: the first is the background, the second the foreground.
- Anything else is an InvalidSelection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from alphacontrast.errors import InvalidColorInput, InvalidSelection
from alphacontrast.schema import (
    Color,
    ContrastConfig,
    ContrastResult,
    LayerSample,
    TextContext,
)
from alphacontrast.measure.contrast import evaluate

log = logging.getLogger(__name__)

SELECT_LAYERS_MESSAGE = "Please select one or two layers."
NO_ARTBOARD_MESSAGE = (
    "This plugin requires a single layer on an artboard "
    "or two selected layers to work."
)


class LayerKind(Enum):
    """Discriminator for the layer variant."""
    TEXT = "text"
    SHAPE = "shape"


@dataclass(frozen=True, slots=True)
class Fill:
    """
    A layer fill.

    Attributes:
        color: Fill color
        alpha: The fill color's own alpha channel (0.0-1.0)
        enabled: Disabled fills are ignored when picking a text color
    """
    color: Color
    alpha: float = 1.0
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class ShapeLayer:
    """
    Any non-text layer. Its color is its first fill.

    Attributes:
        fills: Fills in stacking order
        opacity: Layer opacity (0.0-1.0), separate from fill alpha
    """
    fills: tuple[Fill, ...] = ()
    opacity: float = 1.0

    @property
    def kind(self) -> LayerKind:
        return LayerKind.SHAPE


@dataclass(frozen=True, slots=True)
class TextLayer:
    """
    A text layer.

    Attributes:
        text_color: Color set on the text itself
        text_alpha: Alpha channel of text_color
        font_size: Font size in points
        font_postscript_name: e.g. "Helvetica-Bold"; "Bold" or "Medium"
            in the name marks heavy text
        fills: Fills in stacking order; an enabled first fill overrides
            the text color
        opacity: Layer opacity (0.0-1.0)
    """
    text_color: Color
    text_alpha: float = 1.0
    font_size: float = 14.0
    font_postscript_name: str = ""
    fills: tuple[Fill, ...] = ()
    opacity: float = 1.0

    @property
    def kind(self) -> LayerKind:
        return LayerKind.TEXT

    @property
    def text_context(self) -> TextContext:
        return TextContext.from_font(self.font_size, self.font_postscript_name)


Layer = Union[TextLayer, ShapeLayer]


@dataclass(frozen=True, slots=True)
class Artboard:
    """
    The canvas a single selected layer is checked against.

    Attributes:
        background: Artboard background color
        alpha: Alpha channel of the background color
    """
    background: Color
    alpha: float = 1.0


def _layer_color(layer: Layer) -> tuple[Color, float]:
    """Pick the color and its alpha channel that a layer renders with."""
    first_fill = layer.fills[0] if layer.fills else None

    if layer.kind is LayerKind.TEXT:
        if first_fill is not None and first_fill.enabled:
            return first_fill.color, first_fill.alpha
        return layer.text_color, layer.text_alpha

    if first_fill is None:
        raise InvalidColorInput("Selected layer has no fill")
    return first_fill.color, first_fill.alpha


def resolve_layer(layer: Layer) -> tuple[LayerSample, Optional[TextContext]]:
    """
    Resolve a layer to the inputs of the contrast core.

    Returns:
        (sample with alpha = color alpha × layer opacity, text metrics or None)

    Raises:
        InvalidColorInput: If a shape has no fill or a value is out of range.
    """
    if not isinstance(layer, (TextLayer, ShapeLayer)):
        raise TypeError(f"Expected TextLayer or ShapeLayer, got {type(layer).__name__}")
    color, alpha = _layer_color(layer)
    sample = LayerSample.from_layer(color, alpha, layer.opacity)
    text = layer.text_context if layer.kind is LayerKind.TEXT else None
    return sample, text


def check_selection(
    selection: Sequence[Layer],
    artboard: Optional[Artboard] = None,
    *,
    config: Optional[ContrastConfig] = None,
) -> ContrastResult:
    """
    Run a contrast check on a host selection.

    Args:
        selection: Selected layers, background first when there are two
        artboard: Canvas used as background for a single selected layer
        config: Evaluation settings

    Returns:
        ContrastResult for the selection.

    Raises:
        InvalidSelection: If the selection cannot be checked.
        InvalidColorInput: If a selected layer has no usable color.
    """
    count = len(selection)
    log.debug("checking selection of %d layer(s)", count)

    if count == 1:
        if artboard is None:
            raise InvalidSelection(NO_ARTBOARD_MESSAGE)
        background = LayerSample(color=artboard.background, alpha=artboard.alpha)
        foreground, text = resolve_layer(selection[0])
    elif count == 2:
        background, bg_text = resolve_layer(selection[0])
        foreground, fg_text = resolve_layer(selection[1])
        # Foreground text metrics win when both layers are text
        text = fg_text if fg_text is not None else bg_text
    else:
        raise InvalidSelection(SELECT_LAYERS_MESSAGE)

    return evaluate(background, foreground, text, config=config)
