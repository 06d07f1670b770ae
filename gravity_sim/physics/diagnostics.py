"""Diagnostics for particle sets."""

import numpy as np
from typing import Sequence, Tuple


def particle_arrays(particles: Sequence) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Stack particle state into arrays.

    Returns:
        Tuple of (positions (n, 2), velocities (n, 2), masses (n,))
    """
    n = len(particles)
    positions = np.zeros((n, 2))
    velocities = np.zeros((n, 2))
    masses = np.zeros(n)
    for i, p in enumerate(particles):
        positions[i] = (p.position.x, p.position.y)
        velocities[i] = (p.velocity.x, p.velocity.y)
        masses[i] = p.mass
    return positions, velocities, masses


def total_mass(particles: Sequence) -> float:
    return float(sum(p.mass for p in particles))


def centre_of_mass(particles: Sequence) -> np.ndarray:
    """Mass-weighted mean position; the plain mean if all masses are zero."""
    positions, _, masses = particle_arrays(particles)
    if len(masses) == 0:
        return np.zeros(2)
    m_total = np.sum(masses)
    if m_total == 0:
        return np.mean(positions, axis=0)
    return np.sum(masses[:, np.newaxis] * positions, axis=0) / m_total


def total_momentum(particles: Sequence) -> np.ndarray:
    """Sum of m*v, shape (2,)."""
    _, velocities, masses = particle_arrays(particles)
    return np.sum(masses[:, np.newaxis] * velocities, axis=0)


def kinetic_energy(particles: Sequence) -> float:
    """K = 0.5 * Σ m v²."""
    _, velocities, masses = particle_arrays(particles)
    return float(0.5 * np.sum(masses * np.sum(velocities ** 2, axis=1)))


class Diagnostics:
    """Snapshot of the conserved-ish quantities of a particle set."""

    def __init__(self, particles: Sequence):
        self.particles = particles

    def summary(self) -> dict:
        momentum = total_momentum(self.particles)
        com = centre_of_mass(self.particles)
        return {
            "n": len(self.particles),
            "mass": total_mass(self.particles),
            "com_x": float(com[0]),
            "com_y": float(com[1]),
            "px": float(momentum[0]),
            "py": float(momentum[1]),
            "kinetic": kinetic_energy(self.particles),
        }
