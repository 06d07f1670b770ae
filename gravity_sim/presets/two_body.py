"""Two equal masses at rest."""

from typing import List

from gravity_sim.geometry.vector import Vec2
from gravity_sim.physics.particle import Particle
from gravity_sim.presets.base import Preset


class TwoBody(Preset):
    """Two bodies of equal mass on the x axis, initially at rest."""

    def __init__(
        self,
        n_particles: int = 2,
        seed: int = None,
        width: float = 100.0,
        height: float = 100.0,
        mass: float = 10.0,
        separation: float = 10.0,
        origin: Vec2 = None,
    ):
        super().__init__(2, seed, width, height)
        self.mass = mass
        self.separation = separation
        self.origin = origin if origin is not None else Vec2(0.0, 0.0)

    @property
    def name(self) -> str:
        return "two_body"

    def generate(self) -> List[Particle]:
        return [
            Particle(self.origin, Vec2.zero(), self.mass, name="a"),
            Particle(self.origin + Vec2(self.separation, 0.0), Vec2.zero(), self.mass, name="b"),
        ]
