# tests/test_cli.py

import json

import pytest

import storycal
from storycal import cli
from storycal.core.config_io import dump_config

from conftest import make_harvest_config


def test_list(capsys):
    assert cli.main(["list"]) == 0
    out = capsys.readouterr().out
    assert "coruscant" in out and "simple365" in out


def test_show(capsys):
    assert cli.main(["show", "0", "--calendar", "coruscant"]) == 0
    assert capsys.readouterr().out.strip() == "Day 1, Conference Season (Q1), 0 ABY at 00:00"


def test_show_shorthand_negative(capsys):
    assert cli.main(["-1", "--short"]) == 0
    assert capsys.readouterr().out.strip() == "Day 365, Year 1 BE"


def test_show_with_attributes(capsys):
    assert cli.main(["show", str(91 * 1440), "--calendar", "coruscant", "--attr", "special_day"]) == 0
    out = capsys.readouterr().out
    assert "special_day: Festival Day" in out


def test_to_time(capsys):
    assert cli.main(["to-time", "--year", "-1", "--day", "368", "--hour", "23", "--minute", "59",
                     "--calendar", "coruscant"]) == 0
    assert capsys.readouterr().out.strip() == "-1"


def test_to_time_range_check():
    with pytest.raises(SystemExit):
        cli.main(["to-time", "--year", "0", "--day", "400"])


def test_age(capsys):
    assert cli.main(["age", "0", str(525600 * 20)]) == 0
    assert capsys.readouterr().out.strip() == "20 years old"


def test_config_file(tmp_path, capsys):
    path = tmp_path / "harvest.json"
    path.write_text(json.dumps(dump_config(make_harvest_config())), encoding="utf-8")
    try:
        assert cli.main(["show", "0", "--config", str(path), "--short"]) == 0
        assert capsys.readouterr().out.strip() == "1/1/1 12 BR"
    finally:
        storycal.unregister_calendar("harvest")


def test_diag_round_trip(capsys):
    assert cli.main(["diag", "round-trip", "--N", "200"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_diag_year_table(capsys):
    assert cli.main(["diag", "year-table", "--calendar", "coruscant", "--step", "23"]) == 0
    out = capsys.readouterr().out
    assert "Coruscant Standard Calendar" in out
    assert "quarter" in out
