from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from ..sim import SpringSystem


@dataclass(frozen=True)
class RunConfig:
    dt: float
    steps: int
    record_mass: int
    output_name: str

    def __post_init__(self) -> None:
        if not math.isfinite(self.dt) or self.dt <= 0:
            raise ValueError(f"dt must be a positive finite number, got {self.dt}")
        if self.steps < 0:
            raise ValueError("steps must be non-negative")


class Scenario(Protocol):
    scenario_id: str
    name: str

    def create_system(self) -> SpringSystem:
        ...

    def run_config(self) -> RunConfig:
        ...
