"""State I/O for saving and loading particle sets."""

import numpy as np
import json
from typing import Any, Dict, List, Optional, Sequence, Tuple
from pathlib import Path

from gravity_sim.geometry.vector import Vec2
from gravity_sim.physics.diagnostics import particle_arrays
from gravity_sim.physics.particle import Particle


def save_particles(
    particles: Sequence,
    output_path: str,
    metadata: Optional[Dict[str, Any]] = None
):
    """Save particle state to file.

    Args:
        particles: Particles to save
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary
    """
    output_path = Path(output_path)
    positions, velocities, masses = particle_arrays(particles)

    if output_path.suffix == '.npz':
        save_dict = {
            'positions': positions,
            'velocities': velocities,
            'masses': masses
        }
        if metadata:
            # Only scalars fit in npz entries
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        state_dict = {
            'positions': positions.tolist(),
            'velocities': velocities.tolist(),
            'masses': masses.tolist(),
            'metadata': metadata or {}
        }
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_arrays(input_path: str) -> Tuple[np.ndarray, np.ndarray, np.ndarray, Dict[str, Any]]:
    """Load raw state arrays from file.

    Returns:
        Tuple of (positions, velocities, masses, metadata)
    """
    input_path = Path(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            positions = data['positions']
            velocities = data['velocities']
            masses = data['masses']

            metadata = {}
            for key in data.keys():
                if key.startswith('metadata_'):
                    metadata[key[len('metadata_'):]] = data[key].item()

        return positions, velocities, masses, metadata

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)

        positions = np.array(state_dict['positions'], dtype=float).reshape(-1, 2)
        velocities = np.array(state_dict['velocities'], dtype=float).reshape(-1, 2)
        masses = np.array(state_dict['masses'], dtype=float)
        metadata = state_dict.get('metadata', {})

        return positions, velocities, masses, metadata

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")


def load_particles(input_path: str) -> Tuple[List[Particle], Dict[str, Any]]:
    """Load particles from file.

    Returns:
        Tuple of (particles, metadata)
    """
    positions, velocities, masses, metadata = load_arrays(input_path)
    particles = [
        Particle(Vec2.from_iterable(pos), Vec2.from_iterable(vel), float(m))
        for pos, vel, m in zip(positions, velocities, masses)
    ]
    return particles, metadata
