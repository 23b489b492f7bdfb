"""
storycal.engines.calendar
-------------------------
The Orchestrator. Binds the subdivision calculator, time converter, date
formatter and temporal arithmetic of a single CalendarConfig behind one
object. Engines hold no state besides their config and are cheap to build.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from storycal.core.types import CalendarConfig, Duration, ParsedDate, StoryTime
from storycal.engines.arithmetic import TemporalArithmetic
from storycal.engines.converter import TimeConverter
from storycal.engines.formatter import DateFormatter
from storycal.engines.subdivisions import SubdivisionCalculator
from storycal.engines.validation import validate_config

logger = logging.getLogger(__name__)


class CalendarEngine:
    def __init__(self, config: CalendarConfig, *, validate: bool = True):
        if validate:
            validate_config(config)
        else:
            logger.warning("calendar %r built without validation", config.id)

        self.config = config
        self.subdivisions = SubdivisionCalculator(config.subdivisions)
        self.converter = TimeConverter(config, self.subdivisions)
        self.formatter = DateFormatter(config, self.subdivisions)
        self.arithmetic = TemporalArithmetic(config, self.converter)
        logger.debug("built engine for calendar %r", config.id)

    def __repr__(self) -> str:
        return f"CalendarEngine(id={self.config.id!r})"

    @property
    def id(self) -> str:
        return self.config.id

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def story_time_to_date(self, time: StoryTime) -> ParsedDate:
        return self.converter.story_time_to_date(time)

    def date_to_story_time(self, date: ParsedDate) -> StoryTime:
        return self.converter.date_to_story_time(date)

    def make_date(self, year: int, day_of_year: int = 1, hour: int = 0, minute: int = 0) -> ParsedDate:
        return self.converter.make_date(year, day_of_year, hour, minute)

    def calculate_subdivisions(self, day_of_year: int) -> Dict[str, int]:
        return self.subdivisions.calculate(day_of_year)

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------

    def format_date(self, date: ParsedDate, include_time: bool = True) -> str:
        return self.formatter.format_date(date, include_time)

    def format_story_time(self, time: StoryTime, include_time: Optional[bool] = None) -> str:
        if include_time is None:
            include_time = self.config.display.include_time_by_default
        return self.formatter.format_date(self.story_time_to_date(time), include_time)

    def get_day_of_subdivision(self, date: ParsedDate, subdivision_id: str) -> int:
        return self.formatter.get_day_of_subdivision(date, subdivision_id)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_minutes(self, time: StoryTime, minutes: int) -> StoryTime:
        return self.arithmetic.add_minutes(time, minutes)

    def add_hours(self, time: StoryTime, hours: int) -> StoryTime:
        return self.arithmetic.add_hours(time, hours)

    def add_days(self, time: StoryTime, days: int) -> StoryTime:
        return self.arithmetic.add_days(time, days)

    def add_years(self, time: StoryTime, years: int) -> StoryTime:
        return self.arithmetic.add_years(time, years)

    def duration_between(self, start: StoryTime, end: StoryTime) -> Duration:
        return self.arithmetic.duration_between(start, end)

    def round_to_hour(self, time: StoryTime) -> StoryTime:
        return self.arithmetic.round_to_hour(time)

    def start_of_day(self, time: StoryTime) -> StoryTime:
        return self.arithmetic.start_of_day(time)

    def start_of_year(self, time: StoryTime) -> StoryTime:
        return self.arithmetic.start_of_year(time)

    def calculate_age(self, birth: StoryTime, current: StoryTime) -> float:
        return self.arithmetic.calculate_age(birth, current)

    def format_age(self, birth: StoryTime, current: StoryTime) -> str:
        return self.arithmetic.format_age(birth, current)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        cfg = self.config
        return {
            "id": cfg.id,
            "name": cfg.name,
            "description": cfg.description,
            "minutes_per_hour": cfg.minutes_per_hour,
            "hours_per_day": cfg.hours_per_day,
            "days_per_year": cfg.days_per_year,
            "minutes_per_year": cfg.minutes_per_year,
            "epoch_offset": cfg.epoch_offset,
            "subdivisions": list(self.subdivisions.ids()),
            "eras": (cfg.eras.positive, cfg.eras.negative),
        }

    def explain(self, time: StoryTime) -> Dict[str, Any]:
        date = self.story_time_to_date(time)
        return {
            "time": time,
            "year": date.year,
            "era": date.era,
            "day_of_year": date.day_of_year,
            "hour": date.hour,
            "minute": date.minute,
            "subdivisions": dict(date.subdivisions),
            "days_of_subdivisions": {
                sid: self.get_day_of_subdivision(date, sid) for sid in date.subdivisions
            },
            "special_day": self.formatter.special_day_label(date),
        }
