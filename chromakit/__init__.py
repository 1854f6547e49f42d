#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/__init__.py

__version__ = "0.1.0"

from chromakit.api import contrast, parse_color, simulate, to_hsl, to_oklch, to_rgb_string
from chromakit.core.color import HSL, OKLCH, Color
from chromakit.core.contrast import ContrastResult
from chromakit.core.vision import DeficiencyKind

__all__ = [
    "Color",
    "HSL",
    "OKLCH",
    "ContrastResult",
    "DeficiencyKind",
    "parse_color",
    "to_hsl",
    "to_oklch",
    "to_rgb_string",
    "contrast",
    "simulate",
]
