"""
Gravity Simulator - 2D Barnes-Hut N-body simulation.

Features:
- Region quadtree with bottom-up folds and truncated traversals
- Barnes-Hut centre-of-mass aggregation and opening-angle selection
- Four-stage integrator (plus classical RK4)
- Parallel per-particle updates
- Presets, state I/O, quadtree rendering and a CLI
"""

__version__ = "0.1.0"

from gravity_sim.geometry import Rectangle, Vec2
from gravity_sim.physics.mass_point import MassPoint
from gravity_sim.physics.particle import Particle
from gravity_sim.physics.simulation import MassSimulation
from gravity_sim.physics.simulator import Simulator
from gravity_sim.quadtree import Direction, Quadtree, QuadtreeFolder

__all__ = [
    "Vec2",
    "Rectangle",
    "Direction",
    "Quadtree",
    "QuadtreeFolder",
    "MassPoint",
    "Particle",
    "MassSimulation",
    "Simulator",
]
