#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/shared/sanitizer.py

import argparse
import re

from chromakit.core import config as c

# Exactly six hex digits, optional leading '#'. No shorthand, no alpha.
HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value) -> str:
    """
    Returns the 6-character uppercase form of a hex color string, or an
    empty string when ``value`` is not exactly ``#RRGGBB`` / ``RRGGBB``.
    """
    if not isinstance(value, str):
        return ""
    match = HEX_PATTERN.fullmatch(value)
    if not match:
        return ""
    return match.group(1).upper()


def _extract_positive_only_int(value: str) -> int:
    """
    Extracts a strictly positive integer from a string by stripping out
    all non-numeric characters (including minus signs).
    """
    if value is None:
        return None
    digits_only = re.sub(r"[^0-9]", "", str(value))
    if not digits_only:
        return None
    return int(digits_only)


def _extract_alpha_only(value: str) -> str:
    if value is None:
        return ""
    return re.sub(r"[^a-z]", "", str(value).lower())


# ==========================================
# Argparse type validators
# ==========================================


def handle_hex(v: str) -> str:
    """Validator for 6-digit hex color codes."""
    h = normalize_hex(v)
    if not h:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex color: '{raw}' (expected RRGGBB or #RRGGBB)")
    return h


def handle_color_format(v: str) -> str:
    """Validator for output color formats."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.COLOR_FORMATS:
        raw = _sanitize_for_log(v)
        choices = ", ".join(c.COLOR_FORMATS)
        raise argparse.ArgumentTypeError(f"invalid color format: '{raw}' (choose from {choices})")
    return cleaned


def handle_positive_int(min_v: int, max_v: int):
    """
    Factory function returning a validator that specifically handles
    positive integers clamped within a given range.
    """
    def validator(v: str) -> int:
        val = _extract_positive_only_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid numeric value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "color_format": handle_color_format,
    "intensity": handle_positive_int(0, 100),
}
