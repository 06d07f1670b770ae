"""Numerical integrators for the mass simulation."""

from gravity_sim.physics.integrators.base import AccelerationField, Integrator
from gravity_sim.physics.integrators.four_stage import FourStageIntegrator
from gravity_sim.physics.integrators.rk4 import RK4Integrator

INTEGRATORS = {
    "four_stage": FourStageIntegrator,
    "rk4": RK4Integrator,
}


def get_integrator(name: str) -> Integrator:
    """Get an integrator instance by name."""
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "AccelerationField",
    "Integrator",
    "FourStageIntegrator",
    "RK4Integrator",
    "INTEGRATORS",
    "get_integrator",
]
