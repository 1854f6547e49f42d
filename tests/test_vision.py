import pytest

from chromakit.core import config as c
from chromakit.core.color import Color
from chromakit.core.vision import (
    DeficiencyKind,
    apply_deficiency,
    fe_color_matrix_values,
    get_matrix,
    parse_kind,
    svg_filter,
)

SAMPLES = [
    Color(99, 102, 241),
    Color(255, 0, 0),
    Color(0, 255, 0),
    Color(0, 0, 255),
    Color(18, 52, 86),
    Color(250, 128, 114),
    Color(128, 128, 128),
]


def test_every_kind_has_a_4x5_matrix():
    for kind in DeficiencyKind:
        matrix = get_matrix(kind)
        assert len(matrix) == 4
        assert all(len(row) == 5 for row in matrix)
        assert matrix[3] == (0, 0, 0, 1, 0)


def test_linear_rgb_calibration_is_pinned():
    assert get_matrix("protanopia")[0] == (0.152286, 1.052583, -0.204868, 0, 0)
    assert get_matrix("deuteranopia")[1] == (0.280085, 0.672501, 0.047413, 0, 0)
    assert get_matrix("tritanopia")[2] == (0.004733, 0.691367, 0.303900, 0, 0)


def test_matrix_table_is_read_only():
    with pytest.raises(TypeError):
        c.CVD_MATRICES["protanopia"] = ((1, 0, 0, 0, 0),)
    with pytest.raises(TypeError):
        get_matrix("protanopia")[0][0] = 1.0


def test_parse_kind():
    assert parse_kind("Deuteranopia") is DeficiencyKind.DEUTERANOPIA
    assert parse_kind(DeficiencyKind.TRITANOMALY) is DeficiencyKind.TRITANOMALY
    assert parse_kind("normal") is None
    assert parse_kind(None) is None
    assert parse_kind(3) is None


@pytest.mark.parametrize("kind", ["bogus", "", None, 42, "normal"])
def test_unknown_kind_is_passthrough(kind):
    color = Color(99, 102, 241)
    assert apply_deficiency(color, kind) is color


def test_simulation_happens_in_linear_light():
    # Encoded-space application would give roughly (39, 29, 0).
    assert apply_deficiency(Color(255, 0, 0), "protanopia") == Color(109, 95, 0)


@pytest.mark.parametrize("color", SAMPLES)
def test_achromatopsia_collapses_to_gray(color):
    sim = apply_deficiency(color, DeficiencyKind.ACHROMATOPSIA)
    assert sim.r == sim.g == sim.b


@pytest.mark.parametrize("kind", list(DeficiencyKind))
def test_white_and_black_are_fixed_points(kind):
    assert apply_deficiency(Color(255, 255, 255), kind).rgb == (255, 255, 255)
    assert apply_deficiency(Color(0, 0, 0), kind).rgb == (0, 0, 0)


@pytest.mark.parametrize("kind", list(DeficiencyKind))
def test_output_is_clamped(kind):
    for color in SAMPLES:
        sim = apply_deficiency(color, kind)
        assert all(isinstance(v, int) and 0 <= v <= 255 for v in sim.rgb)


@pytest.mark.parametrize("color", SAMPLES)
def test_zero_severity_is_identity(color):
    assert apply_deficiency(color, "deuteranopia", severity=0.0) == color


def test_severity_is_clamped():
    color = Color(255, 0, 0)
    assert apply_deficiency(color, "protanopia", severity=5) == apply_deficiency(color, "protanopia")
    assert apply_deficiency(color, "protanopia", severity=-1) == color


def test_alpha_passes_through():
    sim = apply_deficiency(Color(99, 102, 241, 0.5), "tritanopia")
    assert sim.alpha == 0.5


def test_invalid_color_returns_none():
    assert apply_deficiency(Color(300, 0, 0), "protanopia") is None
    assert apply_deficiency((255, 0, 0), "protanopia") is None


def test_fe_color_matrix_values():
    assert fe_color_matrix_values("achromatopsia") == (
        "0.299 0.587 0.114 0 0 "
        "0.299 0.587 0.114 0 0 "
        "0.299 0.587 0.114 0 0 "
        "0 0 0 1 0"
    )
    assert fe_color_matrix_values("bogus") is None


def test_svg_filter_uses_linear_rgb():
    markup = svg_filter(DeficiencyKind.DEUTERANOPIA, "cvd")
    assert markup.startswith('<filter id="cvd" color-interpolation-filters="linearRGB">')
    assert 'values="0.367322 0.860646 -0.227968 0 0 ' in markup
    assert svg_filter("bogus") is None


def test_labels():
    assert DeficiencyKind.ACHROMATOMALY.label == "Achromatomaly"


@pytest.mark.parametrize("severity", [None, "high", True, [0.5]])
def test_non_numeric_severity_means_full(severity):
    color = Color(99, 102, 241)
    assert apply_deficiency(color, "protanopia", severity) == apply_deficiency(color, "protanopia")


@pytest.mark.parametrize(
    "filter_id",
    ['"><script>x</script>', "a b", "1abc", "", "cvd'onload", None, 42],
)
def test_svg_filter_rejects_unsafe_ids(filter_id):
    assert svg_filter("protanopia", filter_id) is None


def test_svg_filter_accepts_plain_ids():
    markup = svg_filter("protanopia", "cvd_filter-2")
    assert markup.startswith('<filter id="cvd_filter-2" ')
    assert svg_filter("protanopia").startswith(f'<filter id="{c.DEFAULT_FILTER_ID}" ')
