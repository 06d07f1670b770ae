"""Configuration management."""

import json
import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, field, fields


@dataclass
class Config:
    """Simulation configuration."""
    # Field
    width: float = 100.0
    height: float = 100.0

    # Simulation parameters
    theta: float = 1.2
    g: float = 1e-6
    dt: float = 1.0
    n_steps: int = 100
    integrator: str = "four_stage"
    max_workers: Optional[int] = None
    max_depth: int = 64

    # Preset parameters
    preset: str = "uniform"
    n_particles: int = 500
    preset_params: Dict[str, Any] = field(default_factory=dict)

    # Output
    output_path: str = "output"
    render: bool = False
    verbose: bool = False

    # Reproducibility
    seed: Optional[int] = None

    def validate(self):
        """Raise ValueError for settings no simulation can run with."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field dimensions must be positive, got {self.width}x{self.height}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.theta <= 0:
            raise ValueError(f"theta must be positive, got {self.theta}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build a Config, rejecting unknown keys."""
    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return Config(**data)


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return config_from_dict(data or {})


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
