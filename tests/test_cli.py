import pytest

from chromakit.main import main


def run(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code

def test_inspect_all(capsys):
    main(["-H", "6366F1", "-all"])
    out = capsys.readouterr().out
    assert "#6366F1" in out
    assert "rgb(99, 102, 241)" in out
    assert "hsl(239, 84%, 67%)" in out
    assert "oklch(" in out
    assert "contrast white" in out

def test_inspect_requires_hex(capsys):
    assert run([]) == 2
    assert "-H/--hex is required" in capsys.readouterr().err

def test_inspect_rejects_bad_hex(capsys):
    assert run(["-H", "FFF"]) == 2
    assert "invalid hex color" in capsys.readouterr().err

def test_misplaced_subcommand(capsys):
    assert run(["-H", "FFFFFF", "vision"]) == 2
    assert "must be the first argument" in capsys.readouterr().err

def test_convert(capsys):
    assert run(["convert", "-H", "#6366f1", "-t", "rgb"]) == 0
    assert capsys.readouterr().out.strip() == "rgb(99, 102, 241)"

def test_convert_rejects_unknown_format(capsys):
    assert run(["convert", "-H", "6366F1", "-t", "cmyk"]) == 2
    assert "invalid color format" in capsys.readouterr().err

def test_contrast(capsys):
    assert run(["contrast", "-b", "FFFFFF", "-f", "767676"]) == 0
    out = capsys.readouterr().out
    assert "4.54:1" in out
    assert "Pass" in out and "Fail" in out

def test_vision_swatches(capsys):
    assert run(["vision", "-H", "FF0000", "-p"]) == 0
    out = capsys.readouterr().out
    assert "protanopia" in out
    assert "#6D5F00" in out

def test_vision_svg(capsys):
    assert run(["vision", "-all", "--svg"]) == 0
    out = capsys.readouterr().out
    assert out.count("<filter ") == 8
    assert 'id="chromakit-cvd-filter-achromatopsia"' in out

def test_vision_without_type_warns(capsys):
    assert run(["vision", "-H", "FF0000"]) == 0
    assert "no simulation type selected" in capsys.readouterr().err


def test_stray_argument_is_echoed_on_one_line(capsys):
    assert run(["-H", "FFFFFF", "oops\n[success] ok"]) == 2
    err = capsys.readouterr().err
    assert err.count("\n") == 1
    assert "'oops [success] ok'" in err
