#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/api.py

"""
Engine boundary used by UI and storage collaborators.

Every function here is pure and total: bad input produces ``None`` (or,
for ``simulate``, the original color) rather than an exception.
"""

from typing import Optional, Union

from chromakit.core.color import HSL, OKLCH, Color, is_valid_color
from chromakit.core.contrast import ColorInput, ContrastResult, evaluate_contrast
from chromakit.core.conversions import hex_to_rgb, rgb_to_hsl, rgb_to_oklch
from chromakit.core.vision import DeficiencyKind, apply_deficiency
from chromakit.shared.formatting import format_rgb


def parse_color(value: str) -> Optional[Color]:
    return hex_to_rgb(value)


def to_hsl(color: Color) -> Optional[HSL]:
    if not is_valid_color(color):
        return None
    return rgb_to_hsl(*color.rgb)


def to_oklch(color: Color) -> Optional[OKLCH]:
    if not is_valid_color(color):
        return None
    return rgb_to_oklch(*color.rgb)


def to_rgb_string(color: Color) -> Optional[str]:
    return format_rgb(color)


def contrast(bg: ColorInput, fg: ColorInput) -> Optional[ContrastResult]:
    return evaluate_contrast(bg, fg)


def simulate(color: Color, kind: Union[str, DeficiencyKind], severity: float = 1.0) -> Optional[Color]:
    return apply_deficiency(color, kind, severity)
