"""Basic example of using the gravity simulator."""

from gravity_sim import Simulator
from gravity_sim.physics.diagnostics import Diagnostics
from gravity_sim.presets import OrbitingDisk


def main():
    """Run a central mass with a disk of satellites."""
    preset = OrbitingDisk(n_particles=300, seed=42, central_mass=1e5)
    particles = preset.generate()

    sim = Simulator(particles, preset.width, preset.height, dt=1.0, theta=1.2, g=1e-6)

    print("Running simulation...")
    for step in range(200):
        sim.step()
        if step % 50 == 0:
            d = Diagnostics(particles).summary()
            print(f"Step {step}: Time={sim.time:.1f}, nodes={len(sim.regions)}, "
                  f"K={d['kinetic']:.6f}, skipped={len(sim.simulation.last_skipped)}")

    print("Simulation complete!")


if __name__ == "__main__":
    main()
