#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/shared/formatting.py

from typing import Optional

from chromakit.core import config as c
from chromakit.core.color import HSL, OKLCH, Color, is_valid_color
from chromakit.core.conversions import rgb_to_hsl, rgb_to_oklch


def _num(v) -> str:
    """Shortest locale-independent form: 100, 58.5, 0.23."""
    v = float(v)
    if v == int(v):
        return str(int(v))
    return repr(v)


def format_hex(color: Color) -> Optional[str]:
    if not is_valid_color(color):
        return None
    return color.hex


def format_rgb(color: Color) -> Optional[str]:
    if not is_valid_color(color):
        return None
    return f"rgb({color.r}, {color.g}, {color.b})"


def format_hsl(hsl: HSL) -> Optional[str]:
    if not isinstance(hsl, HSL):
        return None
    return f"hsl({_num(hsl.h)}, {_num(hsl.s)}%, {_num(hsl.l)}%)"


def format_oklch(oklch: OKLCH) -> Optional[str]:
    if not isinstance(oklch, OKLCH):
        return None
    return f"oklch({_num(oklch.l)}% {_num(oklch.c)} {_num(oklch.h)})"


def format_ratio(ratio: float) -> Optional[str]:
    if ratio is None:
        return None
    return f"{ratio:.2f}:1"


def format_color(color: Color, fmt: str = c.DEFAULT_COLOR_FORMAT) -> Optional[str]:
    """
    Render ``color`` in one of hex, rgb, hsl or oklch.

    Unknown formats fall back to hex, matching how a stored preference
    that no longer exists is treated.
    """
    if not is_valid_color(color):
        return None
    if fmt == "rgb":
        return format_rgb(color)
    if fmt == "hsl":
        return format_hsl(rgb_to_hsl(*color.rgb))
    if fmt == "oklch":
        return format_oklch(rgb_to_oklch(*color.rgb))
    return color.hex
