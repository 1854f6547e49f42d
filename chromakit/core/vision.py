#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/core/vision.py

"""
Color vision deficiency simulation.

Matrices come from Machado, Oliveira & Fernandes (2009), "A
Physiologically-based Model for Simulation of Color Vision Deficiency",
and are calibrated for linear RGB. Every simulation therefore linearizes
the input, applies the 4x5 matrix to ``[R G B A 1]`` and re-encodes to
sRGB. Applying these coefficients to gamma-encoded channels gives
visibly wrong results.
"""

import re
from enum import Enum
from numbers import Real
from types import MappingProxyType
from typing import Optional, Tuple, Union

from . import config as c
from .color import Color, is_valid_color
from .conversions import _linear_to_srgb, _srgb_to_linear
from chromakit.shared.clamping import _clamp01, _clamp255, _round_half_up

DeficiencyMatrix = Tuple[Tuple[float, float, float, float, float], ...]

# XML Name subset safe inside a double-quoted attribute and a url(#id) reference
FILTER_ID_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


class DeficiencyKind(str, Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOMALY = "tritanomaly"
    ACHROMATOPSIA = "achromatopsia"
    ACHROMATOMALY = "achromatomaly"

    @property
    def label(self) -> str:
        return c.SIMULATION_LABELS[self.value]


_MATRICES = MappingProxyType({kind: c.CVD_MATRICES[kind.value] for kind in DeficiencyKind})


def parse_kind(kind: Union[str, DeficiencyKind, None]) -> Optional[DeficiencyKind]:
    """Resolve an enum member or a case-insensitive name; None if unknown."""
    if isinstance(kind, DeficiencyKind):
        return kind
    if not isinstance(kind, str):
        return None
    try:
        return DeficiencyKind(kind.strip().lower())
    except ValueError:
        return None


def get_matrix(kind: Union[str, DeficiencyKind]) -> Optional[DeficiencyMatrix]:
    resolved = parse_kind(kind)
    if resolved is None:
        return None
    return _MATRICES[resolved]


def _apply_matrix(matrix: DeficiencyMatrix, vec: Tuple[float, float, float, float]) -> Tuple[float, ...]:
    r, g, b, a = vec
    return tuple(
        row[0] * r + row[1] * g + row[2] * b + row[3] * a + row[4]
        for row in matrix
    )


def apply_deficiency(
    color: Color,
    kind: Union[str, DeficiencyKind],
    severity: float = 1.0,
) -> Optional[Color]:
    """
    Simulate how ``color`` appears under the deficiency ``kind``.

    An unrecognized ``kind`` returns ``color`` unchanged so per-pixel
    callers never have to guard the call. ``severity`` blends the
    original and fully simulated linear values and is clamped to [0, 1];
    a non-numeric severity means full severity. Returns None only when
    ``color`` itself is not a valid Color.
    """
    if not is_valid_color(color):
        return None
    matrix = get_matrix(kind)
    if matrix is None:
        return color

    if isinstance(severity, Real) and not isinstance(severity, bool):
        f = _clamp01(float(severity))
    else:
        f = c.UNIT
    lin = (_srgb_to_linear(color.r), _srgb_to_linear(color.g), _srgb_to_linear(color.b))
    sim = _apply_matrix(matrix, (lin[0], lin[1], lin[2], color.alpha))

    channels = []
    for orig, new in zip(lin, sim[:3]):
        mixed = (1 - f) * orig + f * new
        encoded = _linear_to_srgb(mixed) * c.RGB_MAX
        channels.append(int(_clamp255(_round_half_up(encoded))))

    alpha = _clamp01((1 - f) * color.alpha + f * sim[3])
    return Color(channels[0], channels[1], channels[2], alpha)


def _format_coefficient(v: float) -> str:
    if v == int(v):
        return str(int(v))
    return repr(float(v))


def fe_color_matrix_values(kind: Union[str, DeficiencyKind]) -> Optional[str]:
    """The 20 coefficients of ``kind`` as an feColorMatrix ``values`` string."""
    matrix = get_matrix(kind)
    if matrix is None:
        return None
    return " ".join(_format_coefficient(v) for row in matrix for v in row)


def svg_filter(kind: Union[str, DeficiencyKind], filter_id: str = c.DEFAULT_FILTER_ID) -> Optional[str]:
    """
    A ``<filter>`` element applying ``kind`` to page content.

    The filter interpolates in linearRGB, which is the space the
    matrices are calibrated for. Returns None for an unknown ``kind`` or
    a ``filter_id`` that is not a plain identifier.
    """
    if not isinstance(filter_id, str) or not FILTER_ID_PATTERN.fullmatch(filter_id):
        return None
    values = fe_color_matrix_values(kind)
    if values is None:
        return None
    return (
        f'<filter id="{filter_id}" color-interpolation-filters="linearRGB">'
        f'<feColorMatrix type="matrix" values="{values}" />'
        f"</filter>"
    )
