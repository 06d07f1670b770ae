"""Particles scattered uniformly over the field."""

import numpy as np
from typing import List

from gravity_sim.geometry.vector import Vec2
from gravity_sim.physics.particle import Particle
from gravity_sim.presets.base import Preset


class UniformField(Preset):
    """Random positions over the whole field with small random velocities."""

    def __init__(
        self,
        n_particles: int = 500,
        seed: int = None,
        width: float = 100.0,
        height: float = 100.0,
        mass_range: tuple = (1.0, 10.0),
        max_speed: float = 0.0,
    ):
        """Initialize uniform preset.

        Args:
            n_particles: Number of particles
            seed: Random seed
            width: Field width
            height: Field height
            mass_range: (low, high) range masses are drawn from
            max_speed: Upper bound of the initial speed
        """
        super().__init__(n_particles, seed, width, height)
        self.mass_range = mass_range
        self.max_speed = max_speed

    @property
    def name(self) -> str:
        return "uniform"

    def generate(self) -> List[Particle]:
        rng = np.random.default_rng(self.seed)
        n = self.n_particles

        xs = rng.uniform(0.0, self.width, n)
        ys = rng.uniform(0.0, self.height, n)
        masses = rng.uniform(self.mass_range[0], self.mass_range[1], n)
        speeds = rng.uniform(0.0, self.max_speed, n)
        angles = rng.uniform(0.0, 2 * np.pi, n)

        return [
            Particle(
                Vec2(float(xs[i]), float(ys[i])),
                Vec2(float(speeds[i] * np.cos(angles[i])), float(speeds[i] * np.sin(angles[i]))),
                float(masses[i]),
            )
            for i in range(n)
        ]
