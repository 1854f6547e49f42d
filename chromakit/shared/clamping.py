#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(255.0, v))


def _round_half_up(v: float, ndigits: int = 0) -> float:
    """Round with ties going towards +infinity, the way browsers round."""
    scale = 10 ** ndigits
    return math.floor(v * scale + 0.5) / scale
