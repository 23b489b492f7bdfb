"""
storycal.engines.arithmetic
---------------------------
Durations, rounding and ages on the linear StoryTime axis. Additions are
plain integer sums; only the start-of-* helpers go through the calendar.
"""

from __future__ import annotations

from storycal.core.types import CalendarConfig, Duration, StoryTime
from storycal.engines.converter import TimeConverter


class TemporalArithmetic:
    def __init__(self, config: CalendarConfig, converter: TimeConverter | None = None):
        self.config = config
        self.converter = converter or TimeConverter(config)

    # ---------------------------------------------------------
    # Additions
    # ---------------------------------------------------------

    def add_minutes(self, time: StoryTime, minutes: int) -> StoryTime:
        return time + minutes

    def add_hours(self, time: StoryTime, hours: int) -> StoryTime:
        return time + hours * self.config.minutes_per_hour

    def add_days(self, time: StoryTime, days: int) -> StoryTime:
        return time + days * self.config.minutes_per_day

    def add_years(self, time: StoryTime, years: int) -> StoryTime:
        return time + years * self.config.minutes_per_year

    def duration_between(self, start: StoryTime, end: StoryTime) -> Duration:
        """Signed day/hour/minute decomposition of end - start."""
        delta = end - start
        sign = -1 if delta < 0 else 1
        days, rem = divmod(abs(delta), self.config.minutes_per_day)
        hours, minutes = divmod(rem, self.config.minutes_per_hour)
        return Duration(days=sign * days, hours=sign * hours, minutes=sign * minutes)

    # ---------------------------------------------------------
    # Rounding
    # ---------------------------------------------------------

    def round_to_hour(self, time: StoryTime) -> StoryTime:
        mph = self.config.minutes_per_hour
        remainder = time % mph
        # ties round up
        if 2 * remainder < mph:
            return time - remainder
        return time + (mph - remainder)

    def start_of_day(self, time: StoryTime) -> StoryTime:
        date = self.converter.story_time_to_date(time)
        return self.converter.date_to_story_time(date.replace(hour=0, minute=0))

    def start_of_year(self, time: StoryTime) -> StoryTime:
        date = self.converter.story_time_to_date(time)
        return self.converter.date_to_story_time(date.replace(day_of_year=1, hour=0, minute=0))

    # ---------------------------------------------------------
    # Ages
    # ---------------------------------------------------------

    def calculate_age(self, birth: StoryTime, current: StoryTime) -> float:
        """Age in (fractional) years of this calendar."""
        return (current - birth) / self.config.minutes_per_year

    def format_age(self, birth: StoryTime, current: StoryTime) -> str:
        # floor to one decimal in whole tenths of a year
        tenths = ((current - birth) * 10) // self.config.minutes_per_year
        whole, frac = divmod(tenths, 10)
        if frac == 0:
            return f"{whole} years old"
        return f"{tenths / 10} years old"
