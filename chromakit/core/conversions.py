#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/core/conversions.py

import math
from typing import Optional, Tuple

from . import config as c
from .color import HSL, OKLCH, Color
from chromakit.shared.clamping import _clamp01, _round_half_up
from chromakit.shared.sanitizer import normalize_hex


def hex_to_rgb(hex_code: str) -> Optional[Color]:
    """Convert a strict ``#RRGGBB`` / ``RRGGBB`` string to a Color."""
    h = normalize_hex(hex_code)
    if not h:
        return None
    return Color(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> Optional[str]:
    """Convert RGB components to canonical ``#RRGGBB``."""
    color = Color.from_rgb(r, g, b)
    if color is None:
        return None
    return color.hex


def rgb_to_hsl(r: int, g: int, b: int) -> Optional[HSL]:
    """Convert RGB to HSL with whole-number degrees and percents."""
    if Color.from_rgb(r, g, b) is None:
        return None
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    L = (cmax + cmin) / c.DIV_2
    if cmax == cmin:
        h = 0.0
        s = 0.0
    else:
        delta = cmax - cmin
        if L > 0.5:
            s = delta / (c.DIV_2 - cmax - cmin)
        else:
            s = delta / (cmax + cmin)
        if cmax == r_f:
            h = (g_f - b_f) / delta + (c.HSL_HUE_MOD if g_f < b_f else 0.0)
        elif cmax == g_f:
            h = (b_f - r_f) / delta + 2.0
        else:
            h = (r_f - g_f) / delta + 4.0
        h /= c.HSL_HUE_MOD
    hue = int(_round_half_up(h * c.HUE_MAX)) % int(c.HUE_MAX)
    return HSL(hue, int(_round_half_up(s * c.PERCENT)), int(_round_half_up(L * c.PERCENT)))


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize an 8-bit sRGB component (IEC 61966-2-1 threshold)."""
    c_norm = color_comp / c.RGB_MAX
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component, result in [0, 1]."""
    l_val = _clamp01(l_val)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def _cbrt(v: float) -> float:
    return abs(v) ** c.OKLAB_CUBE_ROOT_EXP if v >= 0 else -(abs(v) ** c.OKLAB_CUBE_ROOT_EXP)


def _mat3_mul(m, v) -> Tuple[float, float, float]:
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def rgb_to_xyz(r: int, g: int, b: int) -> Optional[Tuple[float, float, float]]:
    """Convert RGB to CIE XYZ (D65, Y of white = 1.0)."""
    if Color.from_rgb(r, g, b) is None:
        return None
    lin = (_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))
    return _mat3_mul((c.M_SRGB_XYZ_X, c.M_SRGB_XYZ_Y, c.M_SRGB_XYZ_Z), lin)


def rgb_to_oklab(r: int, g: int, b: int) -> Optional[Tuple[float, float, float]]:
    """Convert RGB to unrounded OKLab (L in [0, 1])."""
    xyz = rgb_to_xyz(r, g, b)
    if xyz is None:
        return None
    l_val, m, s = _mat3_mul(c.M1_OKLAB, xyz)
    return _mat3_mul(c.M2_OKLAB, (_cbrt(l_val), _cbrt(m), _cbrt(s)))


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to unrounded OKLCH, hue in [0, 360)."""
    chroma = math.sqrt(a * a + b * b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += c.HUE_MAX
    return L, chroma, hue


def rgb_to_oklch(r: int, g: int, b: int) -> Optional[OKLCH]:
    """
    Convert RGB to OKLCH for display.

    Lightness is reported in percent; all three components are rounded
    half-up to two decimals.
    """
    lab = rgb_to_oklab(r, g, b)
    if lab is None:
        return None
    L, chroma, hue = oklab_to_oklch(*lab)
    hue = _round_half_up(hue, c.OKLCH_DECIMALS) % c.HUE_MAX
    return OKLCH(
        _round_half_up(L * c.PERCENT, c.OKLCH_DECIMALS),
        _round_half_up(chroma, c.OKLCH_DECIMALS),
        hue,
    )


# ==========================================
# Direct Conversion Wrappers
# ==========================================


def hex_to_hsl(hex_code: str) -> Optional[HSL]:
    """Direct Hex to HSL."""
    color = hex_to_rgb(hex_code)
    return rgb_to_hsl(*color.rgb) if color else None


def hex_to_oklch(hex_code: str) -> Optional[OKLCH]:
    """Direct Hex to OKLCH."""
    color = hex_to_rgb(hex_code)
    return rgb_to_oklch(*color.rgb) if color else None
