"""Physics: mass aggregation, gravity step and integrators."""

from gravity_sim.physics.mass_point import MassPoint
from gravity_sim.physics.particle import Particle
from gravity_sim.physics.simulation import MassSimulation, opening_angle_criterion
from gravity_sim.physics.simulator import Simulator
from gravity_sim.physics.weights import CalculateWeights, calculate_weights

__all__ = [
    "MassPoint",
    "Particle",
    "MassSimulation",
    "opening_angle_criterion",
    "Simulator",
    "CalculateWeights",
    "calculate_weights",
]
