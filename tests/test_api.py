# tests/test_api.py

import pytest

import storycal
from storycal.core.config_io import dump_config

from conftest import make_harvest_config


@pytest.fixture
def harvest_registered():
    engine = storycal.register_calendar(make_harvest_config())
    yield engine
    storycal.unregister_calendar("harvest")


def test_presets_registered():
    assert storycal.list_calendars() == ["coruscant", "simple365"]
    info = storycal.calendar_info("coruscant")
    assert info["days_per_year"] == 368
    assert info["subdivisions"] == ["quarter", "week"]


def test_default_calendar_is_simple365():
    assert storycal.get_engine().id == "simple365"
    assert storycal.format_story_time(0) == "Day 1, Year 0 AE at 00:00"
    date = storycal.story_time_to_date(-1)
    assert (date.year, date.day_of_year) == (-1, 365)
    assert storycal.date_to_story_time(date) == -1


def test_unknown_calendar():
    with pytest.raises(storycal.UnknownCalendarError, match="Unknown calendar 'nope'"):
        storycal.get_engine("nope")
    with pytest.raises(KeyError):
        storycal.format_story_time(0, calendar="nope")


def test_register_and_unregister(harvest_registered):
    assert "harvest" in storycal.list_calendars()
    assert storycal.format_story_time(0, calendar="harvest", include_time=False) == "1/1/1 12 BR"
    with pytest.raises(KeyError, match="already exists"):
        storycal.register_calendar(make_harvest_config())
    storycal.register_calendar(dump_config(make_harvest_config(epoch_offset=0)), overwrite=True)
    assert storycal.story_time_to_date(0, calendar="harvest").year == 0


def test_register_rejects_invalid_config():
    bad = make_harvest_config().tweak(id="broken", days_per_year=361)
    with pytest.raises(storycal.CalendarConfigError):
        storycal.register_calendar(bad)
    assert "broken" not in storycal.list_calendars()


def test_same_story_time_many_calendars(harvest_registered):
    t = 10 * 529920
    assert storycal.format_story_time(t, calendar="coruscant", include_time=False).endswith("10 ABY")
    years = {name: storycal.story_time_to_date(t, calendar=name).year for name in storycal.list_calendars()}
    assert years == {"coruscant": 10, "harvest": 2, "simple365": 10}


def test_date_info_attributes():
    info = storycal.date_info(91 * 1440, calendar="coruscant",
                              attributes=("special_day", "days_of", "labels", "era_label"))
    assert info["formatted"].startswith("Festival Day")
    attrs = info["attributes"]
    assert attrs["special_day"] == "Festival Day"
    assert attrs["days_of"] == {"quarter": 92, "week": 1}
    assert attrs["labels"] == {"quarter": "Conference Season", "week": "Week 14"}
    assert attrs["era_label"] == "ABY"

    with pytest.raises(KeyError, match="Unknown attribute"):
        storycal.date_info(0, attributes=("moon_phase",))


def test_explain():
    out = storycal.explain(94 * 1440, calendar="coruscant")
    assert out["subdivisions"] == {"quarter": 2, "week": 1}
    assert out["days_of_subdivisions"] == {"quarter": 3, "week": 95}
    assert out["special_day"] is None


def test_format_age_api():
    assert storycal.format_age(0, 525600 * 20 + 262800) == "20.5 years old"
