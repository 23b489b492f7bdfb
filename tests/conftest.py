import pytest

from storycal.core.types import (
    CalendarConfig,
    DisplayConfig,
    Eras,
    FixedWidthSubdivision,
    VariableWidthSubdivision,
)
from storycal.engines.calendar import CalendarEngine
from storycal.engines.specs import CORUSCANT_CALENDAR, SIMPLE_365_CALENDAR


def make_harvest_config(epoch_offset: int = 12) -> CalendarConfig:
    """
    360-day year, 50-minute hours, 20-hour days.

    season (4 x 90) -> month (3 x 30) -> week (5 x 6)
    tenday (36 x 10) alongside season
    """
    week = FixedWidthSubdivision(
        id="week", name="Week", plural_name="Weeks", count=5, days_per_unit=6,
        label_format="Week {n}",
    )
    month = VariableWidthSubdivision(
        id="month", name="Month", plural_name="Months", count=3, days_per_unit=(30, 30, 30),
        labels=("Early", "", "Late"),
        subdivisions=(week,),
    )
    season = VariableWidthSubdivision(
        id="season", name="Season", plural_name="Seasons", count=4, days_per_unit=(90, 90, 90, 90),
        labels=("Thaw", "Bloom", "Harvest", "Frost"),
        subdivisions=(month,),
    )
    tenday = FixedWidthSubdivision(
        id="tenday", name="Tenday", plural_name="Tendays", count=36, days_per_unit=10,
    )
    return CalendarConfig(
        id="harvest",
        name="Harvest Reckoning",
        minutes_per_hour=50,
        hours_per_day=20,
        days_per_year=360,
        epoch_offset=epoch_offset,
        subdivisions=(season, tenday),
        eras=Eras(positive="AR", negative="BR", zero_label="Founding"),
        display=DisplayConfig(
            default_format="{dayLabel} ({month} of {season}), {year} {era} {time}",
            short_format="{dayOfMonth}/{monthNumber}/{seasonNumber} {year} {era}",
            hour_format="12",
        ),
        special_days={"month": {30: "Month's End"}, "season": {1: "Turning"}},
    )


@pytest.fixture
def coruscant() -> CalendarEngine:
    return CalendarEngine(CORUSCANT_CALENDAR)


@pytest.fixture
def simple365() -> CalendarEngine:
    return CalendarEngine(SIMPLE_365_CALENDAR)


@pytest.fixture
def harvest() -> CalendarEngine:
    return CalendarEngine(make_harvest_config())
