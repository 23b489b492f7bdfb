"""
storycal.engines.factory
------------------------
Transforms pure data configurations into live, executable Engine objects.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from storycal.core.config_io import load_config
from storycal.core.types import CalendarConfig
from storycal.engines.calendar import CalendarEngine


def make_engine(config: Union[CalendarConfig, Mapping[str, Any], str], *, validate: bool = True) -> CalendarEngine:
    """The universal entry point: a config, a stored mapping, or JSON text."""
    if not isinstance(config, CalendarConfig):
        config = load_config(config)
    return CalendarEngine(config, validate=validate)
