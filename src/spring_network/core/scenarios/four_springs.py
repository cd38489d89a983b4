from __future__ import annotations

from ..model import Mass, Spring
from ..sim import SpringSystem
from .base import RunConfig
from .registry import scenario_registry

CORNERS = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)]


class FourSpringsScenario:
    scenario_id = "four_springs"
    name = "One mass, four springs attached"

    def create_system(self) -> SpringSystem:
        masses = [Mass.anchored(x, y) for x, y in CORNERS]
        masses.append(Mass.free(0.2, 0.6, mass=1.0))
        centre = len(CORNERS)
        springs = [Spring(k=2.0, rest_length=2.0) for _ in CORNERS]
        connectivity = {index: (index, centre) for index in range(len(CORNERS))}
        return SpringSystem(masses, springs, connectivity)

    def run_config(self) -> RunConfig:
        return RunConfig(dt=0.01, steps=10000, record_mass=len(CORNERS), output_name="1m4s.dat")


scenario_registry.register(FourSpringsScenario())
