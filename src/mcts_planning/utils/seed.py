"""Seeded random sources."""

import random
from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator a search draws all its random choices from."""
    return np.random.default_rng(seed)


def set_seed(seed: int) -> None:
    """Seed the global ``random`` and numpy generators (scripts only)."""
    random.seed(seed)
    np.random.seed(seed)
