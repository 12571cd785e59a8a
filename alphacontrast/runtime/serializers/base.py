# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    MESSAGE = "message"


def format_ratio(ratio: float, decimals: int = 1) -> str:
    """Render a ratio the way it is displayed, e.g. 21.0 -> "21.0:1"."""
    return f"{ratio:.{decimals}f}:1"
