"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Callable, Tuple

from gravity_sim.geometry.vector import Vec2

# Acceleration felt at a position
AccelerationField = Callable[[Vec2], Vec2]


class Integrator(ABC):
    """Abstract interface for single-particle integrators."""

    @abstractmethod
    def step(self, position: Vec2, velocity: Vec2, acceleration: AccelerationField, dt: float) -> Tuple[Vec2, Vec2]:
        """Advance one particle by one time step.

        Args:
            position: Current position
            velocity: Current velocity
            acceleration: Acceleration as a function of position
            dt: Time step

        Returns:
            Tuple of (new_position, new_velocity)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the nominal order of accuracy."""
        pass
