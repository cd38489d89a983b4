from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, Tuple

import numpy as np

Vector = np.ndarray
Connectivity = Mapping[int, Tuple[int, int]]

DIMENSION = 2


class SpringNetworkError(Exception):
    """Base class for errors raised by the spring network engine."""


class ConstructionError(SpringNetworkError, ValueError):
    """Invalid initial conditions or wiring, detected before any step runs."""


class DegenerateSpringError(SpringNetworkError, ArithmeticError):
    """A spring whose endpoints coincide has no defined direction."""


def _to_vector(values: Iterable[float] | None, *, length: int = DIMENSION) -> Vector:
    if values is None:
        return np.zeros(length, dtype=float)
    arr = np.array(list(values), dtype=float)
    if arr.ndim != 1:
        raise ValueError("Vector must be 1D")
    if arr.size != length:
        raise ValueError(f"Vector must have length {length}")
    return arr


def _format_scalar(value: float) -> str:
    return f"{float(value):g}"


@dataclass(frozen=True)
class MassState:
    mass: float
    position: Vector
    velocity: Vector
    fixed: bool


@dataclass
class Mass:
    mass: float
    position: Vector = field(default_factory=lambda: np.zeros(DIMENSION, dtype=float))
    velocity: Vector = field(default_factory=lambda: np.zeros(DIMENSION, dtype=float))
    force: Vector = field(default_factory=lambda: np.zeros(DIMENSION, dtype=float))
    fixed: bool = False

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.position = _to_vector(self.position)
        self.velocity = _to_vector(self.velocity)
        self.force = _to_vector(self.force)
        if not (np.all(np.isfinite(self.position)) and np.all(np.isfinite(self.velocity))):
            raise ConstructionError(
                f"Mass state must be finite, got position {self.position.tolist()} velocity {self.velocity.tolist()}"
            )
        if self.fixed:
            if np.any(self.velocity != 0.0):
                raise ConstructionError("Fixed mass cannot have a velocity")
            return
        if not math.isfinite(self.mass) or self.mass <= 0:
            raise ConstructionError(f"Free mass must be positive, got {self.mass}")

    @classmethod
    def free(cls, x: float, y: float, mass: float, velocity: Iterable[float] | None = None) -> "Mass":
        return cls(mass=mass, position=np.array([x, y], dtype=float), velocity=_to_vector(velocity))

    @classmethod
    def anchored(cls, x: float, y: float) -> "Mass":
        return cls(mass=0.0, position=np.array([x, y], dtype=float), fixed=True)

    def snapshot(self) -> MassState:
        return MassState(
            mass=self.mass,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            fixed=self.fixed,
        )

    def format_state(self) -> str:
        """Render ``posX posY velX velY`` as one newline-terminated record."""
        fields = (*self.position, *self.velocity)
        return " ".join(_format_scalar(value) for value in fields) + "\n"

    def __str__(self) -> str:
        return self.format_state()


@dataclass(frozen=True)
class Spring:
    k: float
    rest_length: float
    mass1: int | None = None
    mass2: int | None = None

    @property
    def is_wired(self) -> bool:
        return self.mass1 is not None and self.mass2 is not None

    def wired(self, mass1: int, mass2: int) -> "Spring":
        return replace(self, mass1=int(mass1), mass2=int(mass2))

    @staticmethod
    def length(first: Mass, second: Mass) -> float:
        return float(np.linalg.norm(second.position - first.position))

    def force(self, first: Mass, second: Mass) -> Vector:
        """Force exerted on the second endpoint.

        Directed from ``second`` towards ``first`` with magnitude
        ``k * (length - rest_length)``; the first endpoint receives the exact
        negation of this vector.
        """
        delta = first.position - second.position
        distance = float(np.linalg.norm(delta))
        if distance == 0.0:
            raise DegenerateSpringError(
                f"Spring endpoints {self.mass1} and {self.mass2} coincide at {second.position.tolist()}"
            )
        direction = delta / distance
        return self.k * (distance - self.rest_length) * direction

    def potential_energy(self, first: Mass, second: Mass) -> float:
        extension = self.length(first, second) - self.rest_length
        return 0.5 * self.k * extension * extension
