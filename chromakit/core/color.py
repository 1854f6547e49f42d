#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/core/color.py

from numbers import Real
from typing import NamedTuple, Optional

from . import config as c


def _is_channel(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= c.RGB_MAX


def _is_alpha(v) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool) and 0.0 <= v <= c.UNIT


class Color(NamedTuple):
    """
    A single sRGB color: 8-bit channels plus a straight alpha in [0, 1].

    Build untrusted values through ``Color.from_rgb`` so that invalid
    channels produce ``None`` instead of a Color that downstream
    conversions would reject.
    """

    r: int
    g: int
    b: int
    alpha: float = 1.0

    @classmethod
    def from_rgb(cls, r, g, b, alpha=1.0) -> Optional["Color"]:
        if not (_is_channel(r) and _is_channel(g) and _is_channel(b)):
            return None
        if not _is_alpha(alpha):
            return None
        return cls(r, g, b, float(alpha))

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def rgb(self):
        return (self.r, self.g, self.b)


class HSL(NamedTuple):
    """Hue in whole degrees, saturation and lightness in whole percent."""

    h: int
    s: int
    l: int


class OKLCH(NamedTuple):
    """Lightness in percent, chroma and hue (degrees), each to 2 decimals."""

    l: float
    c: float
    h: float


def is_valid_color(color) -> bool:
    """True if ``color`` is a Color whose channels and alpha are in range."""
    return (
        isinstance(color, Color)
        and _is_channel(color.r)
        and _is_channel(color.g)
        and _is_channel(color.b)
        and _is_alpha(color.alpha)
    )
