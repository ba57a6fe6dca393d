# test/test_writer.py
from pathlib import Path

import pytest

from tempfit.core import DegenerateFit, LinearFit, OutputWriteError, Segment
from tempfit.io.writer import format_line, output_path, write_channel_file


def test_format_interpolation_line():
    seg = Segment(x_lo=0, x_hi=30, intercept=10.0, slope=1 / 3)
    assert format_line(seg) == "     0 <= x <=     30 ; y =    10.0000 +     0.3333 x ; interpolation"


def test_format_least_squares_line_with_negative_slope():
    fit = LinearFit(x_lo=30, x_hi=600, intercept=25.0, slope=-1 / 6)
    assert format_line(fit) == "    30 <= x <=    600 ; y =    25.0000 +    -0.1667 x ; least-squares"


def test_integral_float_bounds_print_without_decimals():
    seg = Segment(x_lo=30.0, x_hi=60.0, intercept=0.0, slope=0.0)
    assert format_line(seg).startswith("    30 <= x <=     60 ;")


def test_fractional_bounds_keep_their_decimals():
    seg = Segment(x_lo=7.5, x_hi=12.25, intercept=0.0, slope=0.0)
    assert format_line(seg).startswith("   7.5 <= x <=  12.25 ;")


def test_degenerate_fit_renders_non_finite_values():
    fit = DegenerateFit(
        kind="least-squares",
        x_lo=30,
        x_hi=30,
        intercept=float("nan"),
        slope=float("inf"),
        reason="zero determinant",
    )
    assert format_line(fit) == "    30 <= x <=     30 ; y =        NaN +        inf x ; least-squares"


def test_output_path_naming(tmp_path):
    assert output_path("/data/run-01.txt", 0, tmp_path) == tmp_path / "run-01-core-00.txt"
    assert output_path(Path("logs/temps.log"), 3, tmp_path) == tmp_path / "temps-core-03.txt"


def test_output_path_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert output_path("x/in.txt", 1) == Path.cwd() / "in-core-01.txt"


def test_write_channel_file_writes_lines_in_order(tmp_path):
    p = write_channel_file(tmp_path / "out.txt", ["a", "b", "c"])
    assert p.read_bytes() == b"a\nb\nc\n"


def test_write_channel_file_replaces_existing(tmp_path):
    p = tmp_path / "out.txt"
    p.write_text("stale\nstale\n")
    write_channel_file(p, ["fresh"])
    assert p.read_text() == "fresh\n"


def test_write_channel_file_empty_lines_gives_empty_file(tmp_path):
    p = write_channel_file(tmp_path / "out.txt", [])
    assert p.read_bytes() == b""


def test_write_channel_file_unwritable_raises(tmp_path):
    with pytest.raises(OutputWriteError):
        write_channel_file(tmp_path / "missing-dir" / "out.txt", ["a"])


def test_non_finite_spelling_nan_and_negative_inf():
    fit = DegenerateFit(
        kind="interpolation",
        x_lo=10,
        x_hi=10,
        intercept=float("-inf"),
        slope=float("nan"),
        reason="zero-length time interval",
    )
    assert format_line(fit) == "    10 <= x <=     10 ; y =       -inf +        NaN x ; interpolation"
