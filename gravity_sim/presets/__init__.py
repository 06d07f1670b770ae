"""Preset initial conditions."""

from gravity_sim.presets.base import Preset
from gravity_sim.presets.two_body import TwoBody
from gravity_sim.presets.uniform import UniformField
from gravity_sim.presets.orbiting_disk import OrbitingDisk

PRESETS = {
    "two_body": TwoBody,
    "uniform": UniformField,
    "orbiting_disk": OrbitingDisk,
}


def get_preset(name: str, n_particles: int, seed: int = None, width: float = 100.0, height: float = 100.0, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(n_particles=n_particles, seed=seed, width=width, height=height, **kwargs)


__all__ = ["Preset", "TwoBody", "UniformField", "OrbitingDisk", "PRESETS", "get_preset"]
