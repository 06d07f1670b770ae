"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List

from gravity_sim.physics.particle import Particle


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    def __init__(self, n_particles: int = 100, seed: int = None, width: float = 100.0, height: float = 100.0):
        """Initialize preset.

        Args:
            n_particles: Number of particles
            seed: Random seed for reproducibility
            width: Width of the field the particles must fit in
            height: Height of the field
        """
        self.n_particles = n_particles
        self.seed = seed
        self.width = width
        self.height = height

    @abstractmethod
    def generate(self) -> List[Particle]:
        """Generate initial conditions.

        Returns:
            List of particles inside the field
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
