"""Utilities."""

from .logging import setup_logging
from .seed import make_rng, set_seed

__all__ = ["setup_logging", "make_rng", "set_seed"]
