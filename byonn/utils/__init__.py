"""
Utility functions and helpers for byonn.

This module contains the array backend, logging and random number
generators used to initialise layer weights.
"""

from .backend import xp, set_seed
from .logger import setup_logger, train_logger, bench_logger
from .rng import Rng, SimpleRng

__all__ = [
    "xp",
    "set_seed",
    "setup_logger",
    "train_logger",
    "bench_logger",
    "Rng",
    "SimpleRng",
]
