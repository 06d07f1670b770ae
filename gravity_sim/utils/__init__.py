"""Utility functions for reproducibility and configuration."""

from gravity_sim.utils.reproducibility import set_all_seeds
from gravity_sim.utils.config import load_config, save_config, config_from_dict, Config

__all__ = ["set_all_seeds", "load_config", "save_config", "config_from_dict", "Config"]
