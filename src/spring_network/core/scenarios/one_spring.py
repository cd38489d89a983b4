from __future__ import annotations

from ..model import Mass, Spring
from ..sim import SpringSystem
from .base import RunConfig
from .registry import scenario_registry


class OneSpringScenario:
    scenario_id = "one_spring"
    name = "One spring, one moving mass"

    def create_system(self) -> SpringSystem:
        masses = [
            Mass.anchored(0.0, 0.0),
            Mass.free(0.0, -3.0, mass=3.0),
        ]
        springs = [Spring(k=3.0, rest_length=2.0)]
        # Spring 0 joins the anchor to the hanging mass.
        connectivity = {0: (0, 1)}
        return SpringSystem(masses, springs, connectivity)

    def run_config(self) -> RunConfig:
        return RunConfig(dt=0.1, steps=1000, record_mass=1, output_name="1m1s.dat")


scenario_registry.register(OneSpringScenario())
