"""Rendering of simulation frames."""

from gravity_sim.render.regions import RegionRenderer

__all__ = ["RegionRenderer"]
