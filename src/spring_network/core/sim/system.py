from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass
from typing import Iterator, List, Protocol, Sequence, TextIO

import numpy as np

from ..model import Connectivity, ConstructionError, Mass, MassState, Spring

_LOG = logging.getLogger(__name__)


class Integrator(Protocol):
    def integrate(self, masses: Sequence[Mass], dt: float) -> None:
        ...


@dataclass
class SymplecticEulerIntegrator:
    """Semi-implicit Euler: velocity from the accumulated force, then position from the new velocity."""

    def integrate(self, masses: Sequence[Mass], dt: float) -> None:
        for mass in masses:
            if mass.fixed:
                continue
            mass.velocity = mass.velocity + (dt / mass.mass) * mass.force
            mass.position = mass.position + dt * mass.velocity


def _wire_springs(masses: Sequence[Mass], springs: Sequence[Spring], connectivity: Connectivity) -> List[Spring]:
    wired: List[Spring | None] = [None] * len(springs)
    for spring_index, endpoints in connectivity.items():
        if not 0 <= spring_index < len(springs):
            raise ConstructionError(f"Connectivity references unknown spring {spring_index}")
        mass1, mass2 = endpoints
        for mass_index in (mass1, mass2):
            if not 0 <= mass_index < len(masses):
                raise ConstructionError(
                    f"Spring {spring_index} references mass {mass_index}, only {len(masses)} masses exist"
                )
        if mass1 == mass2:
            raise ConstructionError(f"Spring {spring_index} connects mass {mass1} to itself")
        wired[spring_index] = springs[spring_index].wired(mass1, mass2)
    missing = [index for index, spring in enumerate(wired) if spring is None]
    if missing:
        raise ConstructionError(f"Springs without connectivity: {missing}")
    return [spring for spring in wired if spring is not None]


class SpringSystem:
    """A fixed network of point masses joined by Hookean springs.

    The system owns copies of the masses and springs it is built from. Springs
    refer to their endpoints by index into :attr:`masses`, so the collections
    keep a fixed size for the life of the system.
    """

    def __init__(
        self,
        masses: Sequence[Mass],
        springs: Sequence[Spring],
        connectivity: Connectivity,
        integrator: Integrator | None = None,
    ) -> None:
        self._masses: List[Mass] = [
            Mass(
                mass=mass.mass,
                position=mass.position.copy(),
                velocity=mass.velocity.copy(),
                fixed=mass.fixed,
            )
            for mass in masses
        ]
        self._springs = _wire_springs(self._masses, list(springs), connectivity)
        self.integrator: Integrator = integrator or SymplecticEulerIntegrator()
        self.time = 0.0
        self.steps_taken = 0
        _LOG.debug(
            "Built spring system with %d masses (%d fixed) and %d springs",
            len(self._masses),
            sum(1 for mass in self._masses if mass.fixed),
            len(self._springs),
        )

    @property
    def masses(self) -> Sequence[Mass]:
        return tuple(self._masses)

    @property
    def springs(self) -> Sequence[Spring]:
        return tuple(self._springs)

    def free_masses(self) -> Iterator[Mass]:
        return (mass for mass in self._masses if not mass.fixed)

    def endpoints(self, spring: Spring) -> tuple[Mass, Mass]:
        return self._masses[spring.mass1], self._masses[spring.mass2]

    def reset_forces(self) -> None:
        for mass in self._masses:
            mass.force = np.zeros_like(mass.position)

    def accumulate_forces(self) -> None:
        for spring in self._springs:
            first, second = self.endpoints(spring)
            force = spring.force(first, second)
            second.force = second.force + force
            first.force = first.force - force

    def integrate(self, dt: float) -> None:
        self.integrator.integrate(self._masses, dt)

    def step(self, dt: float) -> None:
        if not math.isfinite(dt) or dt <= 0:
            raise ValueError(f"dt must be a positive finite number, got {dt}")
        self.reset_forces()
        self.accumulate_forces()
        self.integrate(dt)
        self.time += dt
        self.steps_taken += 1

    def _mass_at(self, index: int) -> Mass:
        if not 0 <= index < len(self._masses):
            raise IndexError(f"No mass {index}; system has {len(self._masses)}")
        return self._masses[index]

    def mass_state(self, index: int) -> MassState:
        return self._mass_at(index).snapshot()

    def format_mass(self, index: int) -> str:
        return self._mass_at(index).format_state()

    def display_mass(self, index: int, stream: TextIO | None = None) -> None:
        (stream or sys.stdout).write(self.format_mass(index))
