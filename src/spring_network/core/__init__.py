from .model import (
    Connectivity,
    ConstructionError,
    DegenerateSpringError,
    Mass,
    MassState,
    Spring,
    SpringNetworkError,
    Vector,
)
from .physics import (
    center_of_mass,
    kinetic_energy,
    spring_potential_energy,
    total_energy,
    total_mass,
    total_momentum,
)
from .sim import Integrator, SpringSystem, SymplecticEulerIntegrator

__all__ = [
    "Connectivity",
    "ConstructionError",
    "DegenerateSpringError",
    "Mass",
    "MassState",
    "Spring",
    "SpringNetworkError",
    "Vector",
    "center_of_mass",
    "kinetic_energy",
    "spring_potential_energy",
    "total_energy",
    "total_mass",
    "total_momentum",
    "Integrator",
    "SpringSystem",
    "SymplecticEulerIntegrator",
]
