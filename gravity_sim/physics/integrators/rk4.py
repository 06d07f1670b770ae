"""Runge-Kutta 4th order integrator (high accuracy, O(h⁴))."""

from typing import Tuple

from gravity_sim.geometry.vector import Vec2
from gravity_sim.physics.integrators.base import AccelerationField, Integrator


class RK4Integrator(Integrator):
    """Classical RK4 for the system dr/dt = v, dv/dt = a(r).

    k1_r = v                 k1_v = a(r)
    k2_r = v + k1_v*dt/2     k2_v = a(r + k1_r*dt/2)
    k3_r = v + k2_v*dt/2     k3_v = a(r + k2_r*dt/2)
    k4_r = v + k3_v*dt       k4_v = a(r + k3_r*dt)

    r_new = r + (k1_r + 2*k2_r + 2*k3_r + k4_r)*dt/6
    v_new = v + (k1_v + 2*k2_v + 2*k3_v + k4_v)*dt/6
    """

    @property
    def name(self) -> str:
        return "rk4"

    @property
    def order(self) -> int:
        return 4

    def step(self, position: Vec2, velocity: Vec2, acceleration: AccelerationField, dt: float) -> Tuple[Vec2, Vec2]:
        k1_r = velocity
        k1_v = acceleration(position)

        k2_r = velocity + k1_v.scale(dt / 2)
        k2_v = acceleration(position + k1_r.scale(dt / 2))

        k3_r = velocity + k2_v.scale(dt / 2)
        k3_v = acceleration(position + k2_r.scale(dt / 2))

        k4_r = velocity + k3_v.scale(dt)
        k4_v = acceleration(position + k3_r.scale(dt))

        new_position = position + (k1_r + k2_r.scale(2) + k3_r.scale(2) + k4_r).scale(dt / 6)
        new_velocity = velocity + (k1_v + k2_v.scale(2) + k3_v.scale(2) + k4_v).scale(dt / 6)

        return new_position, new_velocity
