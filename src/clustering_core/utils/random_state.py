"""
Random-source handling for the stochastic seeding routines.

Library code never touches numpy's global state. Public entry points take a
``random_state`` argument and resolve it here exactly once; internal helpers
receive the resulting ``np.random.Generator``.
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from ..config import config
from .logging_config import get_logger

logger = get_logger(__name__)

RandomState = Union[None, int, np.random.Generator]

_default_rng: Optional[np.random.Generator] = None


def default_rng() -> np.random.Generator:
    """
    Return the process-level generator, creating it on first use.

    The generator is seeded from ``config.seeding.random_seed`` (fresh
    entropy when unset).
    """
    global _default_rng
    if _default_rng is None:
        seed = config.seeding.random_seed
        logger.debug("Creating process-level generator (seed=%s)", seed)
        _default_rng = np.random.default_rng(seed)
    return _default_rng


def reset_default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Replace the process-level generator with one seeded by *seed*."""
    global _default_rng
    _default_rng = np.random.default_rng(seed)
    return _default_rng


def check_random_state(random_state: RandomState = None) -> np.random.Generator:
    """
    Turn *random_state* into a ``np.random.Generator``.

    Args:
        random_state: ``None`` for the process-level generator, an ``int``
            seed for a fresh generator, or an existing generator (returned
            as-is).

    Returns:
        A numpy Generator

    Raises:
        ValueError: For any other type
    """
    if random_state is None:
        return default_rng()
    if isinstance(random_state, np.random.Generator):
        return random_state
    if isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        return np.random.default_rng(int(random_state))
    raise ValueError(
        "random_state should be None, an integer seed or a numpy Generator, "
        f"got {type(random_state).__name__}"
    )
