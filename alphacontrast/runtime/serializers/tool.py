# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
Tool output serializer.

Formats a ContrastResult as JSON for programs that drive the check, such as
design-tool bridges or function-calling models.
"""

from __future__ import annotations

import json
from typing import Optional

from alphacontrast.runtime.serializers.base import SerializerFormat, format_ratio
from alphacontrast.runtime.serializers.message import to_message
from alphacontrast.schema import ContrastResult

TOOL_NAME = "alphacontrast_wcag_contrast"


def to_tool_output(
    result: ContrastResult,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    compact: bool = False,
    pair_id: Optional[str] = None,
) -> str:
    """Serialize a ContrastResult as tool output.

    Args:
        result: The ContrastResult to serialize.
        format: JSON, JSON_PRETTY, or MESSAGE (plain message text).
        compact: Only ratio, classification and the display string; drops
            composites and luminances.
        pair_id: Optional identifier when several pairs are reported.

    Returns:
        Serialized string.

    Example (compact=True)::

        {"tool":"alphacontrast_wcag_contrast","ratio":4.6,
         "classification":"AA_Passed","passed":true,"display":"4.6:1",
         "message":"✅ AA passed  4.6:1"}
    """
    if format == SerializerFormat.MESSAGE:
        return to_message(result)

    data: dict = {"tool": TOOL_NAME}
    if pair_id is not None:
        data["pair_id"] = pair_id

    if compact:
        data.update(
            ratio=result.ratio,
            classification=result.classification.value,
            passed=result.passed,
        )
    else:
        data.update(result.to_dict())
    data["display"] = format_ratio(result.ratio, result.decimals)
    data["message"] = to_message(result)

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
