"""Geometry primitives: 2-D vectors and axis-aligned rectangles."""

from gravity_sim.geometry.vector import Vec2
from gravity_sim.geometry.rectangle import Rectangle

__all__ = ["Vec2", "Rectangle"]
