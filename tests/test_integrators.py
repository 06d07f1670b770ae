"""Tests for numerical integrators."""

import pytest

from gravity_sim.geometry import Vec2
from gravity_sim.physics.integrators import (
    FourStageIntegrator,
    RK4Integrator,
    get_integrator,
)


def no_accel(position):
    return Vec2.zero()


def constant(a):
    return lambda position: a


def test_four_stage_integrator():
    """Test the four-stage integrator."""
    integrator = FourStageIntegrator()
    assert integrator.name == "four_stage"
    assert integrator.order == 4

    pos, vel = integrator.step(Vec2(0.0, 0.0), Vec2(0.0, 0.0), constant(Vec2(1.0, 0.0)), 0.1)
    assert pos != Vec2(0.0, 0.0)


def test_four_stage_free_motion():
    """Without acceleration velocity is kept and position follows the stage weights."""
    integrator = FourStageIntegrator()
    v = Vec2(2.0, -1.0)
    for dt in (0.5, 1.0, 2.0):
        pos, vel = integrator.step(Vec2(10.0, 10.0), v, no_accel, dt)
        assert vel == v
        # (v + 2*v*dt + 2*v*dt/2 + v*dt) * dt/6
        factor = (1 + 4 * dt) * dt / 6
        assert pos.x == pytest.approx(10.0 + v.x * factor)
        assert pos.y == pytest.approx(10.0 + v.y * factor)


def test_four_stage_constant_acceleration():
    integrator = FourStageIntegrator()
    a = Vec2(0.5, 0.0)
    dt = 2.0
    pos, vel = integrator.step(Vec2(0.0, 0.0), Vec2(0.0, 0.0), constant(a), dt)
    assert vel.x == pytest.approx(a.x * dt)
    # k3x = a*dt/2, k4x = a*dt
    assert pos.x == pytest.approx(a.x * dt * dt / 3)
    assert pos.y == 0.0


def test_four_stage_evaluates_four_times():
    calls = []

    def accel(position):
        calls.append(position)
        return Vec2(0.0, 1.0)

    FourStageIntegrator().step(Vec2(0.0, 0.0), Vec2(1.0, 0.0), accel, 1.0)
    assert len(calls) == 4
    assert calls[0] == Vec2(0.0, 0.0)
    assert calls[1] == Vec2(0.5, 0.0)


def test_rk4_integrator():
    """Test RK4 integrator."""
    integrator = RK4Integrator()
    assert integrator.name == "rk4"
    assert integrator.order == 4

    v = Vec2(2.0, -1.0)
    pos, vel = integrator.step(Vec2(10.0, 10.0), v, no_accel, 1.5)
    assert vel == v
    assert pos.x == pytest.approx(10.0 + v.x * 1.5)
    assert pos.y == pytest.approx(10.0 + v.y * 1.5)


def test_rk4_constant_acceleration_is_exact():
    a = Vec2(0.5, -0.25)
    v = Vec2(1.0, 1.0)
    dt = 2.0
    pos, vel = RK4Integrator().step(Vec2(0.0, 0.0), v, constant(a), dt)
    assert vel.x == pytest.approx(v.x + a.x * dt)
    assert vel.y == pytest.approx(v.y + a.y * dt)
    assert pos.x == pytest.approx(v.x * dt + 0.5 * a.x * dt * dt)
    assert pos.y == pytest.approx(v.y * dt + 0.5 * a.y * dt * dt)


def test_get_integrator():
    assert isinstance(get_integrator("four_stage"), FourStageIntegrator)
    assert isinstance(get_integrator("RK4"), RK4Integrator)
    with pytest.raises(ValueError):
        get_integrator("leapfrog")
