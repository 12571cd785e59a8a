# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Host runtime for alphacontrast.

1. Host boundary -- layers, artboards, selection rules
2. Serializers -- message text and JSON tool output

The runtime never changes what the core computed.
"""

from alphacontrast.runtime.host import (
    Artboard,
    Fill,
    LayerKind,
    ShapeLayer,
    TextLayer,
    check_selection,
    resolve_layer,
)
from alphacontrast.runtime.serializers import (
    SerializerFormat,
    to_message,
    to_tool_output,
)

__all__ = [
    "Artboard",
    "Fill",
    "LayerKind",
    "ShapeLayer",
    "TextLayer",
    "check_selection",
    "resolve_layer",
    "to_message",
    "to_tool_output",
    "SerializerFormat",
]
