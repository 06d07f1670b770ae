"""Heavy central body with lighter bodies circling it."""

import warnings
import numpy as np
from typing import List

from gravity_sim.geometry.vector import Vec2
from gravity_sim.physics.particle import Particle
from gravity_sim.physics.simulation import DEFAULT_G
from gravity_sim.presets.base import Preset


class OrbitingDisk(Preset):
    """A central mass in the middle of the field and a disk of satellites.

    Satellites get tangential velocities matching the field's force law
    (acceleration ``G*M/r`` for ``r >= 1``), i.e. ``v = sqrt(G*M)``.
    """

    def __init__(
        self,
        n_particles: int = 200,
        seed: int = None,
        width: float = 100.0,
        height: float = 100.0,
        central_mass: float = 1e5,
        satellite_mass: float = 1.0,
        inner_radius: float = 5.0,
        outer_radius: float = None,
        g: float = DEFAULT_G,
    ):
        """Initialize orbiting disk preset.

        Args:
            n_particles: Total number of particles (central body included)
            seed: Random seed
            width: Field width
            height: Field height
            central_mass: Mass of the central body
            satellite_mass: Mass of each satellite
            inner_radius: Minimum satellite distance from the centre
            outer_radius: Maximum satellite distance (default: 40% of the smaller side)
            g: Gravitational constant the velocities are matched to
        """
        super().__init__(n_particles, seed, width, height)
        self.central_mass = central_mass
        self.satellite_mass = satellite_mass
        self.inner_radius = inner_radius
        max_radius = 0.5 * min(width, height)
        if outer_radius is None:
            outer_radius = 0.8 * max_radius
        if outer_radius > max_radius:
            warnings.warn(
                f"outer_radius={outer_radius} does not fit in the field; clamping to {max_radius}"
            )
            outer_radius = max_radius
        self.outer_radius = outer_radius
        self.g = g

    @property
    def name(self) -> str:
        return "orbiting_disk"

    def generate(self) -> List[Particle]:
        rng = np.random.default_rng(self.seed)
        centre = Vec2(self.width / 2, self.height / 2)
        particles = [Particle(centre, Vec2.zero(), self.central_mass, name="centre")]

        n_satellites = max(0, self.n_particles - 1)
        radii = rng.uniform(self.inner_radius, self.outer_radius, n_satellites)
        angles = rng.uniform(0.0, 2 * np.pi, n_satellites)
        speed = float(np.sqrt(self.g * self.central_mass))

        for r, phi in zip(radii, angles):
            offset = Vec2(float(r * np.cos(phi)), float(r * np.sin(phi)))
            # Counter-clockwise tangent
            tangent = Vec2(-offset.y, offset.x).normal()
            particles.append(Particle(centre + offset, tangent.scale(speed), self.satellite_mass))

        return particles
