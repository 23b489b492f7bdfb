from __future__ import annotations

from typing import Dict

from ..core.types import (
    CalendarConfig,
    DisplayConfig,
    Eras,
    FixedWidthSubdivision,
)


# ============================================================
# CORUSCANT STANDARD
# ============================================================

# 368 days: four 92-day quarters, each 91 ordinary days plus a festival
# day. 13 seven-day weeks fill the ordinary days of a quarter.
CORUSCANT_CALENDAR = CalendarConfig(
    id="coruscant",
    name="Coruscant Standard Calendar",
    description="Galactic standard timekeeping (368 days, BBY/ABY)",
    minutes_per_hour=60,
    hours_per_day=24,
    days_per_year=368,
    subdivisions=(
        FixedWidthSubdivision(
            id="quarter",
            name="Quarter",
            plural_name="Quarters",
            count=4,
            days_per_unit=92,
            labels=(
                "Conference Season",
                "Gala Season",
                "Recess Season",
                "Budget Season",
            ),
            subdivisions=(
                FixedWidthSubdivision(
                    id="week",
                    name="Week",
                    plural_name="Weeks",
                    count=13,
                    days_per_unit=7,
                    label_format="Week {n}",
                ),
            ),
        ),
    ),
    eras=Eras(positive="ABY", negative="BBY"),
    display=DisplayConfig(
        default_format="{dayLabel}, {quarter} (Q{quarterNumber}), {year} {era} at {hour}:{minute}",
        short_format="Q{quarterNumber} Day {dayOfQuarter}, {year} {era}",
        include_time_by_default=True,
        hour_format="24",
    ),
    special_days={"quarter": {92: "Festival Day"}},
)


# ============================================================
# SIMPLE 365
# ============================================================

SIMPLE_365_CALENDAR = CalendarConfig(
    id="simple365",
    name="Simple 365-Day Calendar",
    description="Basic 365-day year, no subdivisions",
    minutes_per_hour=60,
    hours_per_day=24,
    days_per_year=365,
    eras=Eras(positive="AE", negative="BE"),
    display=DisplayConfig(
        default_format="Day {dayOfYear}, Year {year} {era} at {hour}:{minute}",
        short_format="Day {dayOfYear}, Year {year} {era}",
        include_time_by_default=True,
        hour_format="24",
    ),
)


ALL_SPECS: Dict[str, CalendarConfig] = {
    CORUSCANT_CALENDAR.id: CORUSCANT_CALENDAR,
    SIMPLE_365_CALENDAR.id: SIMPLE_365_CALENDAR,
}

DEFAULT_CALENDAR = SIMPLE_365_CALENDAR.id
