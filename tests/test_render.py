"""Tests for the region renderer."""

import pytest

from gravity_sim.physics.simulation import MassSimulation
from gravity_sim.presets import UniformField
from gravity_sim.render.regions import RegionRenderer


def test_render_and_save(tmp_path):
    particles = UniformField(n_particles=20, seed=0).generate()
    regions = MassSimulation(particles, 100.0, 100.0).run_simulation(1.0)

    renderer = RegionRenderer(100.0, 100.0, figsize=(3, 3), dpi=50)
    renderer.render(particles, regions)
    frame = renderer.capture_frame()
    assert frame.ndim == 3 and frame.shape[2] == 3

    out = tmp_path / "frame.png"
    renderer.save(str(out))
    assert out.exists()
    renderer.close()


def test_use_before_render():
    renderer = RegionRenderer(100.0, 100.0)
    with pytest.raises(RuntimeError):
        renderer.capture_frame()
    with pytest.raises(RuntimeError):
        renderer.save("unused.png")
