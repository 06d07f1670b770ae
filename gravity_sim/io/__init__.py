"""I/O utilities for state management."""

from gravity_sim.io.state_io import save_particles, load_particles, load_arrays

__all__ = ["save_particles", "load_particles", "load_arrays"]
