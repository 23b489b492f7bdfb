from __future__ import annotations
from typing import Tuple


def split_minutes(
    adjusted: int, minutes_per_year: int, minutes_per_day: int, minutes_per_hour: int
) -> Tuple[int, int, int, int]:
    """
    Split calendar-local minutes into (year, day_of_year, hour, minute).

    Floor division puts year 0 on [0, Y) and year -1 on [-Y, 0), so days
    inside a negative year count forward exactly as in a positive one.
    """
    year, rem = divmod(adjusted, minutes_per_year)
    day0, rem = divmod(rem, minutes_per_day)
    hour, minute = divmod(rem, minutes_per_hour)
    return year, day0 + 1, hour, minute


def join_minutes(
    year: int,
    day_of_year: int,
    hour: int,
    minute: int,
    minutes_per_year: int,
    minutes_per_day: int,
    minutes_per_hour: int,
) -> int:
    """Inverse of split_minutes."""
    total = year * minutes_per_year
    total += (day_of_year - 1) * minutes_per_day
    total += hour * minutes_per_hour
    total += minute
    return total
