# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

"""CLI to check the contrast of two colors."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from alphacontrast.errors import InvalidColorInput
from alphacontrast.measure import evaluate
from alphacontrast.runtime.serializers import SerializerFormat, to_tool_output
from alphacontrast.schema import Color, ContrastConfig, LayerSample, TextContext


def parse_sample(value: str) -> LayerSample:
    """Parse "#RRGGBB" or "#RRGGBB@alpha" into a LayerSample."""
    hex_part, sep, alpha_part = value.partition("@")
    alpha = 1.0
    if sep:
        try:
            alpha = float(alpha_part)
        except ValueError:
            raise InvalidColorInput(f"Bad alpha in {value!r}") from None
    return LayerSample(color=Color.from_hex(hex_part), alpha=alpha)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="alphacontrast",
        description="WCAG 2.0 contrast ratio of two colors with opacity",
    )
    p.add_argument("background", help="Background color, #RRGGBB[@alpha]")
    p.add_argument("foreground", help="Foreground color, #RRGGBB[@alpha]")
    p.add_argument("--font-size", type=float, metavar="PT",
                   help="Font size in points; marks the foreground as text")
    p.add_argument("--heavy", action="store_true",
                   help="Text is bold or medium weight (needs --font-size)")
    p.add_argument("--no-round", action="store_true",
                   help="Keep composited channels at full precision")
    p.add_argument("--format", choices=[f.value for f in SerializerFormat],
                   default=SerializerFormat.MESSAGE.value, help="Output format")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)
    if args.heavy and args.font_size is None:
        p.error("--heavy requires --font-size")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI. Exit code 0 on pass, 1 on AA failure, 2 on bad input."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        background = parse_sample(args.background)
        foreground = parse_sample(args.foreground)
        text = None
        if args.font_size is not None:
            text = TextContext(font_size_pt=args.font_size, heavy=args.heavy)
    except ValueError as e:
        # ContrastError, or a bad TextContext
        print(f"alphacontrast: error: {e}", file=sys.stderr)
        return 2

    config = ContrastConfig(round_composites=not args.no_round)
    result = evaluate(background, foreground, text, config=config)
    print(to_tool_output(result, format=SerializerFormat(args.format)))
    return 0 if result.passed else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
