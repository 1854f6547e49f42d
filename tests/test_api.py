import pytest

import chromakit
from chromakit import HSL, Color, DeficiencyKind, contrast, parse_color, simulate, to_hsl, to_oklch, to_rgb_string


def test_parse_color():
    assert parse_color("#6366F1") == Color(99, 102, 241)
    assert parse_color("#FFF") is None


def test_derived_views():
    color = parse_color("6366f1")
    assert to_hsl(color) == HSL(239, 84, 67)
    assert to_rgb_string(color) == "rgb(99, 102, 241)"
    assert to_oklch(color).l == pytest.approx(58.5, abs=1.0)


def test_derived_views_reject_invalid_color():
    bad = Color(0, 0, 999)
    assert to_hsl(bad) is None
    assert to_oklch(bad) is None
    assert to_rgb_string(bad) is None
    assert to_hsl(None) is None


def test_contrast():
    result = contrast("#FFFFFF", "#000000")
    assert result.ratio == 21.0
    assert result.passes_aa and result.passes_aaa
    assert contrast("#FFFFFF", "not a color") is None


def test_simulate():
    color = parse_color("#FF0000")
    assert simulate(color, DeficiencyKind.PROTANOPIA) == Color(109, 95, 0)
    assert simulate(color, "bogus") is color


def test_simulate_tolerates_bad_severity():
    color = Color(1, 2, 3)
    assert simulate(color, "protanopia", None) == simulate(color, "protanopia")
    assert simulate(color, "protanopia", "strong") == simulate(color, "protanopia")


def test_batch_with_bad_entry_does_not_abort():
    stored = ["#6366F1", "garbage", "#000000"]
    rendered = [to_rgb_string(parse_color(hx)) for hx in stored]
    assert rendered == ["rgb(99, 102, 241)", None, "rgb(0, 0, 0)"]


def test_color_from_rgb_validation():
    assert Color.from_rgb(1, 2, 3) == Color(1, 2, 3)
    assert Color.from_rgb(1, 2, 3, 0.25).alpha == 0.25
    assert Color.from_rgb(1, 2, 3, 1.5) is None
    assert Color.from_rgb(1, 2, 256) is None
    assert Color.from_rgb(1, 2, False) is None


def test_version():
    assert chromakit.__version__
