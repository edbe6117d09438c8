"""Self-seeding random number generation."""

from __future__ import annotations

import os
import random
import time


def make_generator() -> random.Random:
    """Return a new generator seeded from the clock and system entropy."""
    seed = time.monotonic_ns().to_bytes(16, "little", signed=False) + os.urandom(28)
    return random.Random(int.from_bytes(seed, "little"))


_GENERATOR = make_generator()


def random_int(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _GENERATOR.randint(low, high)