from __future__ import annotations

import logging
from pathlib import Path

from ..core.scenarios import Scenario
from ..io import TrajectoryWriter

_LOG = logging.getLogger(__name__)


def run_scenario(scenario: Scenario, output_dir: str | Path, steps: int | None = None) -> Path:
    """Drive a scenario and dump the recorded mass once per step.

    The state written for each step is the one seen before that step is
    applied, so the first record is the initial condition.
    """
    config = scenario.run_config()
    step_count = config.steps if steps is None else steps
    if step_count < 0:
        raise ValueError("steps must be non-negative")
    system = scenario.create_system()
    recorded = system.masses[config.record_mass]
    output_path = Path(output_dir) / config.output_name
    _LOG.info(
        "Running %s for %d steps (dt=%g), recording mass %d",
        scenario.scenario_id,
        step_count,
        config.dt,
        config.record_mass,
    )
    with TrajectoryWriter(output_path) as writer:
        for _ in range(step_count):
            writer.write(recorded)
            system.step(config.dt)
    _LOG.info("Finished %s at t=%g, trajectory in %s", scenario.scenario_id, system.time, output_path)
    return output_path
