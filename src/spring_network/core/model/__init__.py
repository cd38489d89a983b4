from .entities import (
    DIMENSION,
    Connectivity,
    ConstructionError,
    DegenerateSpringError,
    Mass,
    MassState,
    Spring,
    SpringNetworkError,
    Vector,
)

__all__ = [
    "DIMENSION",
    "Connectivity",
    "ConstructionError",
    "DegenerateSpringError",
    "Mass",
    "MassState",
    "Spring",
    "SpringNetworkError",
    "Vector",
]
