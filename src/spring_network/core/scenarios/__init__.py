import importlib

from .base import RunConfig, Scenario
from .registry import ScenarioRegistry, scenario_registry

BUILTIN_SCENARIO_MODULES = ("one_spring", "four_springs")


def load_builtin_scenarios() -> ScenarioRegistry:
    """Import the built-in scenario modules, which register themselves on import."""
    for module_name in BUILTIN_SCENARIO_MODULES:
        importlib.import_module(f"{__name__}.{module_name}")
    return scenario_registry


__all__ = [
    "BUILTIN_SCENARIO_MODULES",
    "RunConfig",
    "Scenario",
    "ScenarioRegistry",
    "scenario_registry",
    "load_builtin_scenarios",
]
