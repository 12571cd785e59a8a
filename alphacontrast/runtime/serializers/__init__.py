# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Serializers for ContrastResult delivery.

All serializers report the result exactly; none of them recompute anything.
"""

from alphacontrast.runtime.serializers.base import SerializerFormat, format_ratio
from alphacontrast.runtime.serializers.message import to_message
from alphacontrast.runtime.serializers.tool import to_tool_output

__all__ = [
    "SerializerFormat",
    "format_ratio",
    "to_message",
    "to_tool_output",
]
