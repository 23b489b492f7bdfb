from __future__ import annotations
from storycal.core.engine import EngineRegistry
from storycal.engines.specs import ALL_SPECS
from storycal.engines.factory import make_engine

def build_registry() -> EngineRegistry:
    engines = {}
    for name, config in ALL_SPECS.items():
        engines[name] = make_engine(config)
    return EngineRegistry(engines)
