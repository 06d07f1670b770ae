"""Render the quadtree cells of a uniform field after a few steps."""

from gravity_sim.physics.simulator import Simulator
from gravity_sim.presets import UniformField
from gravity_sim.render import RegionRenderer


def main():
    particles = UniformField(n_particles=400, seed=0, max_speed=0.05).generate()
    sim = Simulator(particles, 100.0, 100.0, dt=1.0, g=1e-4)
    sim.run(20)

    renderer = RegionRenderer(100.0, 100.0)
    renderer.render(particles, sim.regions, title=f"step {sim.step_count}")
    renderer.save("quadtree.png")
    renderer.close()
    print("Saved quadtree.png")


if __name__ == "__main__":
    main()
