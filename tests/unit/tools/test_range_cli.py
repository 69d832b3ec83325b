"""Tests for the range CLI."""

import logging

import pytest

from utm_calc.application.use_cases.compute_range import RangeResult
from utm_calc.domain.value_objects.utm_coordinate import UtmCoordinate
from utm_calc.tools.range_cli import format_range, main

# ─── format_range ────────────────────────────────────────────────────


def _result(distance_km: float) -> RangeResult:
    p = UtmCoordinate(easting=0.0, northing=0.0)
    return RangeResult(origin=p, destination=p, distance_km=distance_km)


def test_format_range_right_justified():
    assert format_range(_result(5.0), width=6) == "Range:   5000m"


def test_format_range_rounds_to_whole_metres():
    assert format_range(_result(0.0014), width=6) == "Range:      1m"


def test_format_range_wider_than_width():
    assert format_range(_result(1234.5), width=6) == "Range: 1234500m"


# ─── main ────────────────────────────────────────────────────────────


def test_range_mode(capsys):
    assert main(["range", "3", "0", "6", "4"]) == 0
    assert capsys.readouterr().out == "Range:   5000m\n"


def test_range_mode_negative_values(capsys):
    assert main(["range", "-3", "0", "0", "4"]) == 0
    assert capsys.readouterr().out == "Range:   5000m\n"


def test_grid_mode(capsys):
    assert main(["grid", "55341840", "55371844"]) == 0
    assert capsys.readouterr().out == "Range:     50m\n"


def test_grid_mode_strips_whitespace(capsys):
    assert main(["grid", " 5518 ", "5618"]) == 0
    assert capsys.readouterr().out == "Range:   1000m\n"


def test_verbose_flag(capsys):
    assert main(["-v", "grid", "5518", "5618"]) == 0
    assert "Range:" in capsys.readouterr().out


def test_malformed_grid_exits_with_usage(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["grid", "5341840", "55341840"])
    assert exc_info.value.code == 2
    err = capsys.readouterr().err
    assert "usage:" in err
    assert "Malformed coordinates" in err


def test_unparseable_grid_exits_with_usage(capsys, caplog):
    with caplog.at_level(logging.WARNING), pytest.raises(SystemExit) as exc_info:
        main(["grid", "55341840", "5534184X"])
    assert exc_info.value.code == 2
    assert "Could not parse grid reference" in capsys.readouterr().err
    assert "parse_error" in caplog.text


@pytest.mark.parametrize("bad", ["abc", "nan", "inf"])
def test_bad_number_exits_with_usage(bad, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["range", bad, "0", "6", "4"])
    assert exc_info.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_missing_mode_exits():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_wrong_argument_count_exits():
    with pytest.raises(SystemExit) as exc_info:
        main(["range", "3", "0", "6"])
    assert exc_info.value.code == 2
