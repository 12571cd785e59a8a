# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""
User-facing result message.

Produces the one-line summary a host shows after a check::

    ✅ AA passed  4.6:1
"""

from __future__ import annotations

from typing import Optional

from alphacontrast.schema import ContrastResult
from alphacontrast.runtime.serializers.base import format_ratio


def to_message(result: ContrastResult, *, decimals: Optional[int] = None) -> str:
    """Format a result as "<classification label>  <ratio>:1".

    The ratio is shown with the precision it was rounded to unless
    ``decimals`` overrides it.
    """
    if decimals is None:
        decimals = result.decimals
    return f"{result.classification.label}  {format_ratio(result.ratio, decimals)}"
