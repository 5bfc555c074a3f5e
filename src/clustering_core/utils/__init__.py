"""Utility modules for clustering-core."""

from .logging_config import get_logger, setup_logging
from .random_state import check_random_state, default_rng, reset_default_rng

__all__ = [
    "get_logger",
    "setup_logging",
    "check_random_state",
    "default_rng",
    "reset_default_rng",
]
