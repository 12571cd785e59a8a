# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""Error types raised at the boundary of the contrast core."""


class ContrastError(ValueError):
    """Base class for every error raised by alphacontrast."""


class InvalidColorInput(ContrastError):
    """A channel or alpha value is out of range, malformed, or missing."""


class InvalidSelection(ContrastError):
    """
    The host selection cannot be checked.

    The message is user-facing guidance (e.g. "Please select one or two
    layers.") and can be shown as-is.
    """


class InvalidTextContext(ContrastError):
    """A font size is negative or not a number, or the heavy flag is not a bool."""
