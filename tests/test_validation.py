# tests/test_validation.py

from dataclasses import replace

import pytest

from storycal.core.errors import CalendarConfigError
from storycal.core.types import FixedWidthSubdivision, VariableWidthSubdivision
from storycal.engines.calendar import CalendarEngine
from storycal.engines.specs import ALL_SPECS, CORUSCANT_CALENDAR, SIMPLE_365_CALENDAR
from storycal.engines.validation import collect_problems, is_valid, validate_config

from conftest import make_harvest_config


def test_presets_are_valid():
    for config in ALL_SPECS.values():
        assert collect_problems(config) == []
    assert is_valid(make_harvest_config())


def test_bad_scalars():
    config = SIMPLE_365_CALENDAR.tweak(minutes_per_hour=0, days_per_year=-3)
    with pytest.raises(CalendarConfigError) as exc:
        validate_config(config)
    assert len(exc.value.problems) == 2
    assert exc.value.calendar_id == "simple365"
    assert "minutes_per_hour" in str(exc.value)


def test_engine_validates_eagerly():
    config = SIMPLE_365_CALENDAR.tweak(hours_per_day=0)
    with pytest.raises(CalendarConfigError):
        CalendarEngine(config)
    # opt-out still constructs
    CalendarEngine(config, validate=False)


def test_variable_lengths_must_match_count():
    months = VariableWidthSubdivision(
        id="month", name="Month", plural_name="Months", count=12, days_per_unit=(30,) * 11
    )
    problems = collect_problems(SIMPLE_365_CALENDAR.tweak(subdivisions=(months,)))
    assert any("11 unit lengths for 12 units" in p for p in problems)


def test_variable_lengths_must_cover_parent():
    months = VariableWidthSubdivision(
        id="month", name="Month", plural_name="Months", count=12, days_per_unit=(30,) * 12
    )
    problems = collect_problems(SIMPLE_365_CALENDAR.tweak(subdivisions=(months,)))
    assert any("sum to 360" in p and "365" in p for p in problems)


def test_variable_child_checked_against_every_parent_unit():
    halves = VariableWidthSubdivision(
        id="half", name="Half", plural_name="Halves", count=2, days_per_unit=(10, 10)
    )
    parent = VariableWidthSubdivision(
        id="part", name="Part", plural_name="Parts", count=2, days_per_unit=(20, 345),
        subdivisions=(halves,),
    )
    problems = collect_problems(SIMPLE_365_CALENDAR.tweak(subdivisions=(parent,)))
    assert any("'half'" in p and "345" in p for p in problems)


def test_fixed_width_may_leave_tail_days_but_not_overflow():
    weeks = FixedWidthSubdivision(id="week", name="Week", plural_name="Weeks", count=52, days_per_unit=7)
    assert is_valid(SIMPLE_365_CALENDAR.tweak(subdivisions=(weeks,)))

    too_many = replace(weeks, count=53)
    problems = collect_problems(SIMPLE_365_CALENDAR.tweak(subdivisions=(too_many,)))
    assert any("exceeds" in p for p in problems)


def test_duplicate_ids_and_labels():
    quarter = CORUSCANT_CALENDAR.subdivisions[0]
    dup = replace(quarter, subdivisions=(replace(quarter.subdivisions[0], id="quarter"),))
    problems = collect_problems(CORUSCANT_CALENDAR.tweak(subdivisions=(dup,)))
    assert any("duplicate id" in p for p in problems)

    short_labels = replace(quarter, labels=("One", "Two"))
    problems = collect_problems(CORUSCANT_CALENDAR.tweak(subdivisions=(short_labels,)))
    assert any("2 labels for 4 units" in p for p in problems)


def test_special_days_reference_known_subdivisions():
    config = CORUSCANT_CALENDAR.tweak(special_days={"moon": {1: "Full"}, "quarter": {0: "Nope"}})
    problems = collect_problems(config)
    assert any("unknown subdivision 'moon'" in p for p in problems)
    assert any("special day number 0" in p for p in problems)


def test_bad_fixed_width():
    broken = FixedWidthSubdivision(id="x", name="X", plural_name="Xs", count=3, days_per_unit=0)
    problems = collect_problems(SIMPLE_365_CALENDAR.tweak(subdivisions=(broken,)))
    assert any("days_per_unit must be a positive integer" in p for p in problems)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        validate_config(SIMPLE_365_CALENDAR.tweak(days_per_year=0))
