"""CLI main entry point."""

import argparse
import sys
from typing import List, Optional

from gravity_sim.io.state_io import load_particles, save_particles
from gravity_sim.physics.diagnostics import Diagnostics
from gravity_sim.physics.integrators import INTEGRATORS, get_integrator
from gravity_sim.physics.simulator import Simulator
from gravity_sim.presets import PRESETS, get_preset
from gravity_sim.utils.config import Config, load_config
from gravity_sim.utils.reproducibility import set_all_seeds


def build_config(args) -> Config:
    """Config file values, overridden by any flags given on the command line."""
    config = load_config(args.config) if args.config else Config()

    overrides = {
        'preset': args.preset,
        'n_particles': args.particles,
        'n_steps': args.steps,
        'dt': args.dt,
        'theta': args.theta,
        'g': args.g,
        'width': args.width,
        'height': args.height,
        'integrator': args.integrator,
        'max_workers': args.workers,
        'max_depth': args.max_depth,
        'seed': args.seed,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    if args.render:
        config.render = True
    if args.verbose:
        config.verbose = True
    for flag, value in (('--render-every', args.render_every), ('--debug-every', args.debug_every)):
        if value < 1:
            raise ValueError(f"{flag} must be >= 1, got {value}")

    config.validate()
    return config


def run_simulation(args) -> int:
    """Run a simulation."""
    config = build_config(args)

    if config.seed is not None:
        set_all_seeds(config.seed)

    integrator = get_integrator(config.integrator)

    if args.load_state:
        particles, metadata = load_particles(args.load_state)
        source = f"state {args.load_state}"
    else:
        preset = get_preset(
            config.preset,
            config.n_particles,
            seed=config.seed,
            width=config.width,
            height=config.height,
            **config.preset_params,
        )
        particles = preset.generate()
        source = f"preset {preset.name}"

    sim = Simulator(
        particles,
        config.width,
        config.height,
        dt=config.dt,
        theta=config.theta,
        g=config.g,
        integrator=integrator,
        max_workers=config.max_workers,
        max_depth=config.max_depth,
        verbose=config.verbose,
    )
    sim.diag_interval = args.debug_every
    sim.set_profiling(config.verbose)

    renderer = None
    if config.render or args.save_frame:
        from gravity_sim.render.regions import RegionRenderer
        renderer = RegionRenderer(config.width, config.height, interactive=config.render)

    print(f"Running simulation: {source} with {len(particles)} particles")
    print(f"Field: {config.width}x{config.height}, Integrator: {integrator.name}, "
          f"dt: {config.dt}, theta: {config.theta}, G: {config.g}")

    d0 = Diagnostics(particles).summary()
    print(f"{'Step':<8} {'Time':<10} {'K':<14} {'px':<14} {'py':<14} {'Skipped':<8}")
    print("-" * 70)
    print(f"{0:<8} {0.0:<10.2f} {d0['kinetic']:<14.4e} {d0['px']:<14.4e} {d0['py']:<14.4e} {0:<8}")

    for step in range(config.n_steps):
        sim.step()

        if renderer and config.render and step % args.render_every == 0:
            renderer.render(particles, sim.regions, title=f"step {sim.step_count}")

        if step % args.debug_every == 0:
            d = Diagnostics(particles).summary()
            skipped = len(sim.simulation.last_skipped)
            print(f"{sim.step_count:<8} {sim.time:<10.2f} {d['kinetic']:<14.4e} "
                  f"{d['px']:<14.4e} {d['py']:<14.4e} {skipped:<8}")
            if config.verbose:
                print(f"[Step] step_ms={sim.get_timing()['step_ms']:.2f} nodes={len(sim.regions)}")

    if renderer and args.save_frame:
        renderer.render(particles, sim.regions, title=f"step {sim.step_count}")
        renderer.save(args.save_frame)
        print(f"Frame saved to {args.save_frame}")

    if args.save_state:
        save_particles(particles, args.save_state, metadata={
            'time': sim.time,
            'steps': sim.step_count,
            'preset': config.preset,
            'integrator': integrator.name,
            'theta': config.theta,
            'g': config.g,
        })
        print(f"State saved to {args.save_state}")

    if renderer:
        renderer.close()

    print("Simulation complete!")
    return 0


def list_choices() -> int:
    print("Presets:     " + ", ".join(PRESETS.keys()))
    print("Integrators: " + ", ".join(INTEGRATORS.keys()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gravity Simulator - 2D Barnes-Hut N-body simulation")

    parser.add_argument('--list', action='store_true',
                        help='List presets and integrators and exit')
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml); flags override its values')

    # Simulation parameters
    parser.add_argument('--preset', type=str, default=None, choices=list(PRESETS.keys()),
                        help='Preset scenario (default: uniform)')
    parser.add_argument('--particles', type=int, default=None,
                        help='Number of particles')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of simulation steps')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step')
    parser.add_argument('--theta', type=float, default=None,
                        help='Barnes-Hut opening angle (default: 1.2)')
    parser.add_argument('--g', type=float, default=None,
                        help='Gravitational constant (default: 1e-6)')
    parser.add_argument('--width', type=float, default=None,
                        help='Field width')
    parser.add_argument('--height', type=float, default=None,
                        help='Field height')
    parser.add_argument('--integrator', type=str, default=None, choices=list(INTEGRATORS.keys()),
                        help='Integrator (default: four_stage)')
    parser.add_argument('--workers', type=int, default=None,
                        help='Worker threads for the per-particle update (1 = no threads)')
    parser.add_argument('--max-depth', type=int, default=None,
                        help='Deepest quadtree level (default: 64)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed')

    # Output
    parser.add_argument('--render', action='store_true',
                        help='Show particles and quadtree cells while running')
    parser.add_argument('--render-every', type=int, default=1,
                        help='Render every N steps')
    parser.add_argument('--debug-every', type=int, default=10,
                        help='Print diagnostics every N steps')
    parser.add_argument('--verbose', action='store_true',
                        help='Print skipped particles and step timing')
    parser.add_argument('--save-frame', type=str, default=None,
                        help='Save the final frame to an image file')
    parser.add_argument('--save-state', type=str, default=None,
                        help='Save final state to file (.npz or .json)')
    parser.add_argument('--load-state', type=str, default=None,
                        help='Start from a saved state instead of a preset')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        return list_choices()

    try:
        return run_simulation(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
