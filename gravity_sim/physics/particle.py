"""Particle capabilities and a concrete particle type."""

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from gravity_sim.geometry.vector import Vec2


@runtime_checkable
class HasPosition(Protocol):
    position: Vec2


@runtime_checkable
class HasMass(Protocol):
    mass: float


@runtime_checkable
class MutPosition(HasPosition, Protocol):
    def set_position(self, position: Vec2) -> None:
        ...


@runtime_checkable
class MutVelocity(Protocol):
    velocity: Vec2

    def set_velocity(self, velocity: Vec2) -> None:
        ...


@runtime_checkable
class SimulatedParticle(MutPosition, MutVelocity, HasMass, Protocol):
    """Everything a particle needs to take part in a mass simulation."""


@dataclass(eq=False)
class Particle:
    """A massive point particle.

    Particles compare by identity: two particles at the same place with the
    same mass are still different bodies.
    """

    position: Vec2
    velocity: Vec2 = field(default_factory=Vec2.zero)
    mass: float = 1.0
    name: Optional[str] = None

    def set_position(self, position: Vec2):
        self.position = position

    def set_velocity(self, velocity: Vec2):
        self.velocity = velocity
