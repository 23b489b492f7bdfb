"""
storycal.engines.converter
--------------------------
Bidirectional mapping between the universal StoryTime axis and a calendar's
local (year, day, hour, minute) coordinates.
"""

from __future__ import annotations

from storycal.core.time import join_minutes, split_minutes
from storycal.core.types import CalendarConfig, ParsedDate, StoryTime
from storycal.engines.subdivisions import SubdivisionCalculator


class TimeConverter:
    def __init__(self, config: CalendarConfig, subdivisions: SubdivisionCalculator | None = None):
        self.config = config
        self.subdivisions = subdivisions or SubdivisionCalculator(config.subdivisions)

    @property
    def epoch_shift(self) -> int:
        """Minutes between universal time zero and this calendar's year 0."""
        return self.config.epoch_offset * self.config.minutes_per_year

    def story_time_to_date(self, time: StoryTime) -> ParsedDate:
        cfg = self.config
        # 1. Shift onto the calendar's own axis
        adjusted = time - self.epoch_shift

        # 2. Year / day / hour / minute
        year, day_of_year, hour, minute = split_minutes(
            adjusted, cfg.minutes_per_year, cfg.minutes_per_day, cfg.minutes_per_hour
        )

        # 3. Derived subdivision units
        return ParsedDate(
            year=year,
            day_of_year=day_of_year,
            hour=hour,
            minute=minute,
            subdivisions=self.subdivisions.calculate(day_of_year),
        )

    def date_to_story_time(self, date: ParsedDate) -> StoryTime:
        cfg = self.config
        local = join_minutes(
            date.year,
            date.day_of_year,
            date.hour,
            date.minute,
            cfg.minutes_per_year,
            cfg.minutes_per_day,
            cfg.minutes_per_hour,
        )
        return local + self.epoch_shift

    def make_date(self, year: int, day_of_year: int = 1, hour: int = 0, minute: int = 0) -> ParsedDate:
        """Build a ParsedDate with its subdivisions filled in."""
        return ParsedDate(
            year=year,
            day_of_year=day_of_year,
            hour=hour,
            minute=minute,
            subdivisions=self.subdivisions.calculate(day_of_year),
        )
