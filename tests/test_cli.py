"""CLI demo tests."""

import pytest

from imtuple.cli import circle_properties, main


def test_circle_properties() -> None:
    t = circle_properties(2)
    assert t.get_str(0) == "Circle"
    assert t.get_int(1) == 2
    assert t.get_int(2) == 4
    assert abs(t.get_float(3) - 12.566370614359172) < 1e-9


def test_circle_rejects_negative_radius() -> None:
    with pytest.raises(ValueError):
        circle_properties(-1)


def test_demo_output(capsys) -> None:
    assert main(["--no-color"]) == 0
    out = capsys.readouterr().out
    lines = out.split("\n")
    assert lines[0] == "-" * 60
    assert lines[1] == (
        "Format of Tuple Printing: " + '(1, \'2\', "3", (4.0, null, "4\\t\\n", true))'
    )
    assert lines[2].startswith("Circle 5 10 78.5398")
    assert lines[3] == "Circle has the following properties:"
    assert lines[4] == "\tRadius: 5"
    assert lines[5] == "\tDiameter: 10"
    assert lines[7] == "Int: 1; Float: 2.0; unknownType's class: int (integer)"
    assert lines[8] == "-" * 60


def test_demo_color(capsys) -> None:
    assert main(["--color"]) == 0
    assert "\u001b[35mnull\u001b[0m" in capsys.readouterr().out


def test_no_color_env(capsys, monkeypatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert main([]) == 0
    assert "\u001b[" not in capsys.readouterr().out


def test_radius_flag(capsys) -> None:
    assert main(["--no-color", "--radius", "1"]) == 0
    assert "\tDiameter: 2\n" in capsys.readouterr().out


def test_negative_radius_is_error(capsys) -> None:
    assert main(["--radius", "-3"]) == 1
    assert "imtuple: error: radius must not be negative" in capsys.readouterr().err


def test_usage_errors(capsys) -> None:
    assert main(["--bogus"]) == 2
    assert main(["extra"]) == 2
    assert main(["--radius"]) == 2
    assert main(["--radius", "abc"]) == 2
    err = capsys.readouterr().err
    assert "unknown flag '--bogus'" in err
    assert "invalid radius 'abc'" in err


def test_help(capsys) -> None:
    assert main(["--help"]) == 0
    assert capsys.readouterr().out.startswith("imtuple [OPTIONS]")
