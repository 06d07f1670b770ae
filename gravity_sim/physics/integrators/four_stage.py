"""Four-stage Runge-Kutta style integrator used by the mass simulation."""

from typing import Tuple

from gravity_sim.geometry.vector import Vec2
from gravity_sim.physics.integrators.base import AccelerationField, Integrator


class FourStageIntegrator(Integrator):
    """Four acceleration evaluations per step, weighted 1-2-2-1.

    The position stages are kept exactly as the simulation has always used
    them, including ``k2x = (v + v) * dt/2``; this differs from textbook RK4
    (see ``RK4Integrator``) and changing it changes trajectories.

        k1  = a(r)
        k2  = a(r + v*dt/2)          k2x = (v + v)*dt/2
        k3  = a(r + k2x*dt/2)        k3x = (v + k2)*dt/2
        k4  = a(r + k3x*dt)          k4x = (v + k3)*dt

        v' = v + (k1 + 2*k2 + 2*k3 + k4)*dt/6
        r' = r + (v + 2*k2x + 2*k3x + k4x)*dt/6
    """

    @property
    def name(self) -> str:
        return "four_stage"

    @property
    def order(self) -> int:
        return 4

    def step(self, position: Vec2, velocity: Vec2, acceleration: AccelerationField, dt: float) -> Tuple[Vec2, Vec2]:
        k1 = acceleration(position)
        k2 = acceleration(position + velocity.scale(dt / 2))
        k2x = (velocity + velocity).scale(dt / 2)
        k3 = acceleration(position + k2x.scale(dt / 2))
        k3x = (velocity + k2).scale(dt / 2)
        k4 = acceleration(position + k3x.scale(dt))
        k4x = (velocity + k3).scale(dt)

        new_velocity = velocity + (k1 + k2.scale(2) + k3.scale(2) + k4).scale(dt / 6)
        new_position = position + (velocity + k2x.scale(2) + k3x.scale(2) + k4x).scale(dt / 6)

        return new_position, new_velocity
