"""Main simulator controller."""

import time
from typing import Callable, Dict, List, Optional

from gravity_sim.geometry.rectangle import Rectangle
from gravity_sim.physics.diagnostics import Diagnostics, particle_arrays
from gravity_sim.physics.integrators.base import Integrator
from gravity_sim.physics.simulation import DEFAULT_G, DEFAULT_THETA, MassSimulation
from gravity_sim.quadtree.direction import Path
from gravity_sim.quadtree.quadtree import DEFAULT_MAX_DEPTH


class Simulator:
    """Main simulation controller.

    Repeats ``MassSimulation`` steps and keeps track of time.
    """

    def __init__(
        self,
        particles: List,
        width: float,
        height: float,
        dt: float = 1.0,
        theta: float = DEFAULT_THETA,
        g: float = DEFAULT_G,
        integrator: Optional[Integrator] = None,
        max_workers: Optional[int] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        verbose: bool = False,
    ):
        """Initialize simulator.

        Args:
            particles: Particles to simulate (updated in place)
            width: Field width
            height: Field height
            dt: Time step
            theta: Opening-angle threshold
            g: Gravitational constant
            integrator: Integrator to use (default: four-stage)
            max_workers: Worker threads for the per-particle update
            max_depth: Deepest quadtree level
            verbose: Print skip and diagnostic lines while running
        """
        self.simulation = MassSimulation(
            particles,
            width,
            height,
            theta=theta,
            g=g,
            integrator=integrator,
            max_workers=max_workers,
            max_depth=max_depth,
        )
        self.dt = dt
        self.verbose = verbose
        self.time = 0.0
        self.step_count = 0
        self.paused = False
        self.regions: Dict[Path, Rectangle] = {}

        self._last_step_ms: Optional[float] = None
        self._profile = False

        self.on_step_callback: Optional[Callable] = None
        self.diag_interval = 100

    @property
    def particles(self) -> List:
        return self.simulation.elems

    def set_profiling(self, enabled: bool = True):
        """Enable or disable step timing."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last step timing in ms."""
        return {"step_ms": self._last_step_ms}

    def step(self):
        """Perform one simulation step."""
        if self.paused:
            return

        if self._profile:
            t0 = time.perf_counter()
        self.regions = self.simulation.run_simulation(self.dt)
        if self._profile:
            self._last_step_ms = (time.perf_counter() - t0) * 1000.0

        self.time += self.dt
        self.step_count += 1

        skipped = self.simulation.last_skipped
        if self.verbose and skipped:
            print(f"[Skip] step={self.step_count} skipped={len(skipped)}")
        if self.verbose and self.step_count % self.diag_interval == 0:
            self._log_diagnostics()

        if self.on_step_callback:
            self.on_step_callback(self)

    def _log_diagnostics(self):
        """Log mass, momentum, kinetic energy and tree size."""
        d = Diagnostics(self.particles).summary()
        print(
            f"[Diag] step={self.step_count} t={self.time:.4g} nodes={len(self.regions)} "
            f"M={d['mass']:.4g} p=({d['px']:.4e}, {d['py']:.4e}) K={d['kinetic']:.4e}"
        )

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            if self.paused:
                return
            self.step()

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_timestep(self, dt: float):
        """Set time step."""
        self.dt = dt

    def set_integrator(self, integrator: Integrator):
        """Set integrator."""
        self.simulation.integrator = integrator

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        positions, velocities, masses = particle_arrays(self.particles)
        return positions, velocities, masses, self.time, self.step_count
