#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/core/luminance.py

from typing import Optional

from . import config as c
from .color import Color, is_valid_color


def _wcag_to_linear(color_comp: int) -> float:
    """Linearize a component with the WCAG 2.x threshold (0.03928, not 0.04045)."""
    c_norm = color_comp / c.RGB_MAX
    if c_norm <= c.WCAG_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: int, g: int, b: int) -> float:
    return (
        c.LUMA_R * _wcag_to_linear(r) +
        c.LUMA_G * _wcag_to_linear(g) +
        c.LUMA_B * _wcag_to_linear(b)
    )


def relative_luminance(color: Color) -> Optional[float]:
    """WCAG relative luminance of a Color, or None if it is not a valid Color."""
    if not is_valid_color(color):
        return None
    return get_luminance(color.r, color.g, color.b)
