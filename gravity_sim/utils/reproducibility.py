"""Reproducibility utilities for deterministic simulations."""

import random
import numpy as np


def set_all_seeds(seed: int):
    """Set random seeds for reproducibility.

    Presets draw from their own ``np.random.default_rng(seed)``; this covers
    any code using the global generators.

    Args:
        seed: Random seed
    """
    random.seed(seed)
    np.random.seed(seed)
