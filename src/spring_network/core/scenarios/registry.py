from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from ..sim import SpringSystem
from .base import RunConfig, Scenario


class ScenarioRegistry:
    """Named scenario constructors, kept in registration order."""

    def __init__(self) -> None:
        self._scenarios: Dict[str, Scenario] = {}

    def __contains__(self, scenario_id: object) -> bool:
        return scenario_id in self._scenarios

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self._scenarios.values())

    def __len__(self) -> int:
        return len(self._scenarios)

    def register(self, scenario: Scenario) -> None:
        if scenario.scenario_id in self._scenarios:
            raise ValueError(f"Duplicate scenario id: {scenario.scenario_id}")
        self._scenarios[scenario.scenario_id] = scenario

    def get(self, scenario_id: str) -> Scenario:
        if scenario_id not in self._scenarios:
            known = ", ".join(self._scenarios) or "none"
            raise KeyError(f"Unknown scenario id: {scenario_id} (known: {known})")
        return self._scenarios[scenario_id]

    def build(self, scenario_id: str) -> Tuple[SpringSystem, RunConfig]:
        scenario = self.get(scenario_id)
        return scenario.create_system(), scenario.run_config()

    def ids(self) -> List[str]:
        return list(self._scenarios)

    def all(self) -> List[Scenario]:
        return list(self)


scenario_registry = ScenarioRegistry()
