from .system import Integrator, SpringSystem, SymplecticEulerIntegrator

__all__ = ["Integrator", "SpringSystem", "SymplecticEulerIntegrator"]
