from .invariants import (
    center_of_mass,
    kinetic_energy,
    spring_potential_energy,
    total_energy,
    total_mass,
    total_momentum,
)

__all__ = [
    "center_of_mass",
    "kinetic_energy",
    "spring_potential_energy",
    "total_energy",
    "total_mass",
    "total_momentum",
]
