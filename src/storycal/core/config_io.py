"""
Conversion between stored calendar blobs and CalendarConfig.

Stored configurations use the camelCase shape of the story-management
service (``minutesPerHour``, ``daysPerUnitFixed``, ``specialDays`` with
string day keys, ...). Derived totals (``minutesPerDay``, ``minutesPerYear``)
are accepted when consistent and always written back out.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import CalendarConfigError
from .types import (
    CalendarConfig,
    DisplayConfig,
    Eras,
    FixedWidthSubdivision,
    Subdivision,
    VariableWidthSubdivision,
)


def _require(data: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in data or data[key] is None:
        raise CalendarConfigError(f"{where}: missing '{key}'")
    return data[key]


def _subdivision_from_dict(data: Mapping[str, Any], where: str = "subdivisions") -> Subdivision:
    if not isinstance(data, Mapping):
        raise CalendarConfigError(f"{where}: expected an object, got {type(data).__name__}")
    sid = _require(data, "id", where)
    where = f"subdivision '{sid}'"

    fixed = data.get("daysPerUnitFixed")
    variable = data.get("daysPerUnit")
    if fixed and variable:
        raise CalendarConfigError(f"{where}: both daysPerUnitFixed and daysPerUnit are set")
    if not fixed and not variable:
        raise CalendarConfigError(f"{where}: one of daysPerUnitFixed or daysPerUnit is required")

    common = dict(
        id=sid,
        name=data.get("name", sid),
        plural_name=data.get("pluralName", data.get("name", sid)),
        count=_require(data, "count", where),
        labels=tuple(data.get("labels") or ()),
        label_format=data.get("labelFormat"),
        use_custom_labels=data.get("useCustomLabels"),
        subdivisions=tuple(
            _subdivision_from_dict(child, f"{where}.subdivisions")
            for child in data.get("subdivisions") or ()
        ),
    )
    if fixed:
        return FixedWidthSubdivision(days_per_unit=fixed, **common)
    return VariableWidthSubdivision(days_per_unit=tuple(variable), **common)


def _special_days_from_dict(data: Optional[Mapping[str, Any]]) -> Dict[str, Dict[int, str]]:
    out: Dict[str, Dict[int, str]] = {}
    for sid, day_map in (data or {}).items():
        days: Dict[int, str] = {}
        for day, label in day_map.items():
            try:
                days[int(day)] = label
            except (TypeError, ValueError):
                raise CalendarConfigError(f"special days for '{sid}': day {day!r} is not a number") from None
        out[sid] = days
    return out


def load_config(source: Union[Mapping[str, Any], str, bytes]) -> CalendarConfig:
    """Build a CalendarConfig from a stored mapping or its JSON text."""
    if isinstance(source, (str, bytes)):
        try:
            source = json.loads(source)
        except json.JSONDecodeError as e:
            raise CalendarConfigError(f"not valid JSON: {e}") from e
    if not isinstance(source, Mapping):
        raise CalendarConfigError(f"expected an object, got {type(source).__name__}")

    data = source
    cal_id = data.get("id") or ""
    where = f"calendar '{cal_id}'" if cal_id else "calendar"

    eras = _require(data, "eras", where)
    display = _require(data, "display", where)
    config = CalendarConfig(
        id=cal_id,
        name=data.get("name", cal_id),
        description=data.get("description", ""),
        minutes_per_hour=_require(data, "minutesPerHour", where),
        hours_per_day=_require(data, "hoursPerDay", where),
        days_per_year=_require(data, "daysPerYear", where),
        epoch_offset=data.get("epochOffset") or 0,
        subdivisions=tuple(_subdivision_from_dict(s) for s in data.get("subdivisions") or ()),
        eras=Eras(
            positive=_require(eras, "positive", f"{where} eras"),
            negative=_require(eras, "negative", f"{where} eras"),
            zero_label=eras.get("zeroLabel"),
        ),
        display=DisplayConfig(
            default_format=_require(display, "defaultFormat", f"{where} display"),
            short_format=_require(display, "shortFormat", f"{where} display"),
            include_time_by_default=display.get("includeTimeByDefault", True),
            hour_format=str(display.get("hourFormat", "24")),
        ),
        special_days=_special_days_from_dict(data.get("specialDays")),
    )

    mismatched: List[str] = []
    for key, prop in (("minutesPerDay", "minutes_per_day"), ("minutesPerYear", "minutes_per_year")):
        stored = data.get(key)
        if stored is not None and stored != getattr(config, prop):
            mismatched.append(f"{key}={stored} does not match the derived value {getattr(config, prop)}")
    if mismatched:
        raise CalendarConfigError(mismatched, calendar_id=cal_id or None)
    return config


def _subdivision_to_dict(sub: Subdivision) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "id": sub.id,
        "name": sub.name,
        "pluralName": sub.plural_name,
        "count": sub.count,
    }
    if isinstance(sub, FixedWidthSubdivision):
        out["daysPerUnitFixed"] = sub.days_per_unit
    else:
        out["daysPerUnit"] = list(sub.days_per_unit)
    if sub.labels:
        out["labels"] = list(sub.labels)
    if sub.label_format is not None:
        out["labelFormat"] = sub.label_format
    if sub.use_custom_labels is not None:
        out["useCustomLabels"] = sub.use_custom_labels
    if sub.subdivisions:
        out["subdivisions"] = [_subdivision_to_dict(c) for c in sub.subdivisions]
    return out


def dump_config(config: CalendarConfig) -> Dict[str, Any]:
    """Stored (camelCase) form of a config; json.dumps-ready."""
    out: Dict[str, Any] = {
        "id": config.id,
        "name": config.name,
        "description": config.description,
        "minutesPerHour": config.minutes_per_hour,
        "hoursPerDay": config.hours_per_day,
        "minutesPerDay": config.minutes_per_day,
        "daysPerYear": config.days_per_year,
        "minutesPerYear": config.minutes_per_year,
        "epochOffset": config.epoch_offset,
        "subdivisions": [_subdivision_to_dict(s) for s in config.subdivisions],
        "eras": {
            "positive": config.eras.positive,
            "negative": config.eras.negative,
            "zeroLabel": config.eras.zero_label,
        },
        "display": {
            "defaultFormat": config.display.default_format,
            "shortFormat": config.display.short_format,
            "includeTimeByDefault": config.display.include_time_by_default,
            "hourFormat": config.display.hour_format,
        },
    }
    if config.special_days:
        out["specialDays"] = {
            sid: {str(day): label for day, label in days.items()}
            for sid, days in config.special_days.items()
        }
    return out
