from __future__ import annotations

from typing import Iterable, List

import numpy as np

from ..model import Mass, Vector
from ..sim import SpringSystem


def _free(masses: Iterable[Mass]) -> List[Mass]:
    return [mass for mass in masses if not mass.fixed]


def total_mass(masses: Iterable[Mass]) -> float:
    return float(np.sum([mass.mass for mass in _free(masses)]))


def total_momentum(masses: Iterable[Mass]) -> Vector:
    free = _free(masses)
    if not free:
        return np.zeros(2, dtype=float)
    return np.sum([mass.mass * mass.velocity for mass in free], axis=0)


def center_of_mass(masses: Iterable[Mass]) -> Vector:
    free = _free(masses)
    if not free:
        raise ValueError("No free masses provided")
    weights = np.array([mass.mass for mass in free], dtype=float)
    positions = np.stack([mass.position for mass in free])
    return np.sum(positions * weights[:, None], axis=0) / np.sum(weights)


def kinetic_energy(masses: Iterable[Mass]) -> float:
    return float(np.sum([0.5 * mass.mass * float(mass.velocity @ mass.velocity) for mass in _free(masses)]))


def spring_potential_energy(system: SpringSystem) -> float:
    return float(np.sum([spring.potential_energy(*system.endpoints(spring)) for spring in system.springs]))


def total_energy(system: SpringSystem) -> float:
    return kinetic_energy(system.masses) + spring_potential_energy(system)
