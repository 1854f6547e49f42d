import pytest

from chromakit.core.color import HSL, OKLCH, Color
from chromakit.shared.formatting import (
    format_color,
    format_hex,
    format_hsl,
    format_oklch,
    format_ratio,
    format_rgb,
)

INDIGO = Color(99, 102, 241)


def test_format_rgb():
    assert format_rgb(INDIGO) == "rgb(99, 102, 241)"
    assert format_rgb(Color(0, 0, 256)) is None


def test_format_hsl():
    assert format_hsl(HSL(239, 84, 67)) == "hsl(239, 84%, 67%)"
    assert format_hsl(None) is None


@pytest.mark.parametrize("value", ["hsl", (239, 84, 67), 0, OKLCH(58.54, 0.2, 277.12)])
def test_format_hsl_rejects_non_hsl(value):
    assert format_hsl(value) is None


@pytest.mark.parametrize("value", ["oklch", (1, 2, 3), None, HSL(239, 84, 67)])
def test_format_oklch_rejects_non_oklch(value):
    assert format_oklch(value) is None


@pytest.mark.parametrize(
    "oklch, expected",
    [
        (OKLCH(58.54, 0.2, 277.12), "oklch(58.54% 0.2 277.12)"),
        (OKLCH(100.0, 0.0, 0.0), "oklch(100% 0 0)"),
        (OKLCH(62.8, 0.26, 29.23), "oklch(62.8% 0.26 29.23)"),
        (OKLCH(0.0, -0.0, 0.0), "oklch(0% 0 0)"),
    ],
)
def test_format_oklch_uses_shortest_numbers(oklch, expected):
    assert format_oklch(oklch) == expected


def test_format_hex():
    assert format_hex(Color(10, 11, 255)) == "#0A0BFF"


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("hex", "#6366F1"),
        ("rgb", "rgb(99, 102, 241)"),
        ("hsl", "hsl(239, 84%, 67%)"),
        ("unknown", "#6366F1"),
    ],
)
def test_format_color(fmt, expected):
    assert format_color(INDIGO, fmt) == expected


def test_format_color_oklch_and_default():
    assert format_color(INDIGO, "oklch").startswith("oklch(")
    assert format_color(INDIGO) == "#6366F1"
    assert format_color(None, "rgb") is None


def test_format_ratio():
    assert format_ratio(4.5) == "4.50:1"
    assert format_ratio(4.478) == "4.48:1"
    assert format_ratio(None) is None
