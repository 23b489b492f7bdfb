from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute

def special_day(engine, date) -> Dict[str, Any]:
    return {"special_day": engine.formatter.special_day_label(date)}

def days_of_subdivisions(engine, date) -> Dict[str, Any]:
    return {
        "days_of": {sid: engine.get_day_of_subdivision(date, sid) for sid in date.subdivisions}
    }

def subdivision_labels(engine, date) -> Dict[str, Any]:
    labels = {}
    for sid, unit in date.subdivisions.items():
        sub = engine.formatter.find_subdivision(sid)
        if sub is not None:
            labels[sid] = engine.formatter.unit_label(sub, unit)
    return {"labels": labels}

def era_label(engine, date) -> Dict[str, Any]:
    # year 0 is positive; zero_label never replaces the era string
    return {"era_label": engine.config.eras.label(date.era)}

register_attribute("special_day", special_day)
register_attribute("days_of", days_of_subdivisions)
register_attribute("labels", subdivision_labels)
register_attribute("era_label", era_label)
