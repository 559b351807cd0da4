"""
Random number generator helpers for DataSplit.

Every split receives its own numpy Generator; nothing here keeps global state.
"""
import time
import logging

import numpy as np

logger = logging.getLogger(__name__)


def resolve_seed(seed=0):
    """
    Turn a user supplied seed into the seed actually used.

    Args:
        seed (int): Explicit seed, or 0 to seed from the current time.
    Returns:
        int: The resolved, non-negative seed.
    """
    if seed is None or seed == 0:
        resolved = int(time.time())
        logger.debug(f"[RNG] No seed given; using current time {resolved}.")
        return resolved
    if seed < 0:
        raise ValueError(f"Seed must be non-negative, got {seed}.")
    return int(seed)


def make_rng(seed=0):
    """
    Build a freshly seeded Generator.

    Args:
        seed (int): Explicit seed, or 0 to seed from the current time.
    Returns:
        Tuple[np.random.Generator, int]: The generator and the seed it was built from.
    """
    resolved = resolve_seed(seed)
    return np.random.default_rng(resolved), resolved
