"""Point masses standing in for single particles or whole subtrees."""

from typing import Any, Optional

from gravity_sim.geometry.vector import Vec2


class MassPoint:
    """Either one particle or the centre of mass of a set of particles.

    ``linked`` is the particle a leaf mass point came from; aggregates of
    several particles are not linked to anything.
    """

    __slots__ = ("position", "mass", "linked")

    def __init__(self, position: Vec2, mass: float, linked: Optional[Any] = None):
        self.position = position
        self.mass = mass
        self.linked = linked

    def merge(self, other: "MassPoint") -> "MassPoint":
        """Combine into one point at the mass-weighted centroid."""
        combined_mass = self.mass + other.mass

        if combined_mass == 0.0:
            # Two massless points: midpoint, never 0/0
            return MassPoint((self.position + other.position).scale(0.5), 0.0)

        position = (
            self.position.scale(self.mass) + other.position.scale(other.mass)
        ).scale(1.0 / combined_mass)
        return MassPoint(position, combined_mass)

    def is_linked_to(self, elem) -> bool:
        return self.linked is not None and self.linked is elem

    def __repr__(self) -> str:
        return f"MassPoint(position={self.position!r}, mass={self.mass!r})"
