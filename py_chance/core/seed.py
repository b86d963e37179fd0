"""
Seed resolution for Chance sessions.

An explicit seed is used verbatim. Without one, the seed is derived from
the wall clock plus a process-local counter, so sessions created within
the same clock tick still get different streams.
"""

import itertools
import time
from typing import Optional, Union

Seed = Union[int, str]

_counter = itertools.count()

# Low bits of an entropy seed reserved for the counter
_COUNTER_BITS = 20


def entropy_seed() -> int:
    """Build a seed from the current time and the next counter value."""
    tick = next(_counter) & ((1 << _COUNTER_BITS) - 1)
    return (time.time_ns() << _COUNTER_BITS) | tick


def resolve_seed(seed: Optional[Seed] = None) -> Seed:
    """
    Resolve an optional seed into the value that initializes the PRNG.

    Args:
        seed: Integer or string seed, or None for an entropy-derived one

    Returns:
        The seed to hand to AleaPRNG

    Raises:
        TypeError: If the seed is neither an integer nor a string
    """
    if seed is None:
        return entropy_seed()
    if isinstance(seed, bool) or not isinstance(seed, (int, str)):
        raise TypeError(f"Seed must be an int or str, got {type(seed).__name__}")
    return seed
