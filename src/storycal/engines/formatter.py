"""
storycal.engines.formatter
--------------------------
Renders a ParsedDate through the display templates of a calendar.

Placeholders are resolved in a fixed order so that overlapping names behave
predictably:

  1. {time}, {year}, {era}, {hour}, {hour12}, {ampm}, {minute}, {dayOfYear}
  2. {dayLabel}  (special-day label, else "Day <dayOfYear>")
  3. per subdivision: {<id>}, {<id>Number}, {dayOf<Id>}

Anything left unresolved stays in the output verbatim.
"""

from __future__ import annotations

from typing import Optional

from storycal.core.types import CalendarConfig, ParsedDate, Subdivision
from storycal.engines.subdivisions import SubdivisionCalculator, days_before_unit


def capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


class DateFormatter:
    def __init__(self, config: CalendarConfig, subdivisions: SubdivisionCalculator | None = None):
        self.config = config
        self.subdivisions = subdivisions or SubdivisionCalculator(config.subdivisions)

    # ---------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------

    def find_subdivision(self, subdivision_id: str) -> Optional[Subdivision]:
        return self.subdivisions.find(subdivision_id)

    def get_day_of_subdivision(self, date: ParsedDate, subdivision_id: str) -> int:
        """
        Day of year minus the days of the earlier units of that subdivision.
        E.g. day 95 of a 92-day-quarter year is day 3 of quarter 2.

        Only the subdivision's own units are counted, so for a nested id the
        result is not rebased on the enclosing unit (day 95 is in week 1 and
        yields 95).
        """
        sub = self.find_subdivision(subdivision_id)
        if sub is None:
            return 1
        unit = date.subdivisions.get(subdivision_id)
        if unit is None:
            return 1
        return date.day_of_year - days_before_unit(sub, unit)

    def special_day_label(self, date: ParsedDate) -> Optional[str]:
        for subdivision_id, day_map in self.config.special_days.items():
            if subdivision_id not in date.subdivisions:
                continue
            label = day_map.get(self.get_day_of_subdivision(date, subdivision_id))
            if label:
                return label
        return None

    def unit_label(self, sub: Subdivision, unit: int) -> str:
        custom = sub.label_for(unit)
        if custom is not None:
            return custom
        if sub.label_format:
            return sub.label_format.replace("{n}", str(unit))
        return str(unit)

    # ---------------------------------------------------------
    # Clock helpers
    # ---------------------------------------------------------

    def _half_day(self) -> int:
        return self.config.hours_per_day // 2

    def hour12(self, hour: int) -> int:
        half = self._half_day()
        if half <= 0:
            return hour
        return hour % half or half

    def ampm(self, hour: int) -> str:
        half = self._half_day()
        return "AM" if half <= 0 or hour < half else "PM"

    def _time_template(self) -> str:
        if self.config.display.hour_format == "12":
            return "{hour12}:{minute} {ampm}"
        return "{hour}:{minute}"

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------

    def format_date(self, date: ParsedDate, include_time: bool = True) -> str:
        display = self.config.display
        out = display.default_format if include_time else display.short_format

        # 1. Plain placeholders
        out = out.replace("{time}", self._time_template())
        out = (
            out.replace("{year}", str(abs(date.year)))
            .replace("{era}", self.config.eras.label(date.era))
            .replace("{hour}", f"{date.hour:02d}")
            .replace("{hour12}", f"{self.hour12(date.hour):02d}")
            .replace("{ampm}", self.ampm(date.hour))
            .replace("{minute}", f"{date.minute:02d}")
            .replace("{dayOfYear}", str(date.day_of_year))
        )

        # 2. Special days
        if "{dayLabel}" in out:
            label = self.special_day_label(date) or f"Day {date.day_of_year}"
            out = out.replace("{dayLabel}", label)

        # 3. Subdivisions
        for subdivision_id, unit in date.subdivisions.items():
            sub = self.find_subdivision(subdivision_id)
            if sub is None:
                continue

            label_placeholder = "{" + subdivision_id + "}"
            if label_placeholder in out:
                out = out.replace(label_placeholder, self.unit_label(sub, unit))

            out = out.replace("{" + subdivision_id + "Number}", str(unit))

            day_of = "dayOf" + capitalize(subdivision_id)
            if "{" + day_of + "}" in out and not self._is_subdivision_id(day_of, date):
                out = out.replace("{" + day_of + "}", str(self.get_day_of_subdivision(date, subdivision_id)))

        return out

    def _is_subdivision_id(self, name: str, date: ParsedDate) -> bool:
        return name in date.subdivisions or self.find_subdivision(name) is not None
