#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/core/contrast.py

from typing import NamedTuple, Optional, Union

from . import config as c
from .color import Color, is_valid_color
from .conversions import hex_to_rgb
from .luminance import get_luminance

ColorInput = Union[str, Color]


class ContrastResult(NamedTuple):
    ratio: float
    passes_aa: bool
    passes_aaa: bool

    @property
    def levels(self) -> dict:
        return {
            "AA": "Pass" if self.passes_aa else "Fail",
            "AAA": "Pass" if self.passes_aaa else "Fail",
        }


def _resolve(value: ColorInput) -> Optional[Color]:
    if isinstance(value, Color):
        return value if is_valid_color(value) else None
    return hex_to_rgb(value)


def get_contrast_ratio(bg: ColorInput, fg: ColorInput) -> Optional[float]:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors.

    Either argument may be a hex string or a Color. Returns None when
    either one fails to parse. The ratio is symmetric in its arguments.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    bg_color = _resolve(bg)
    fg_color = _resolve(fg)
    if bg_color is None or fg_color is None:
        return None

    y1 = get_luminance(*bg_color.rgb)
    y2 = get_luminance(*fg_color.rgb)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    ratio = (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)
    return max(c.WCAG_MIN_RATIO, min(c.WCAG_MAX_RATIO, ratio))


def evaluate_contrast(bg: ColorInput, fg: ColorInput) -> Optional[ContrastResult]:
    """Contrast ratio plus the normal-text AA (4.5) and AAA (7.0) verdicts."""
    ratio = get_contrast_ratio(bg, fg)
    if ratio is None:
        return None
    return ContrastResult(
        ratio=ratio,
        passes_aa=ratio >= c.WCAG_AA_NORMAL,
        passes_aaa=ratio >= c.WCAG_AAA_NORMAL,
    )
