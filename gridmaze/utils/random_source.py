"""
Seedable randomness for generation code.

Algorithms never touch the module-level ``random`` state. They receive a
``random.Random`` (or a seed) and draw everything from it, which makes a
generation replayable from its seed and safe to run from a thread pool.
"""

from __future__ import annotations

import random

from gridmaze.utils.exceptions import ConfigurationError

RandomSource = random.Random | int | None


def make_rng(rng: RandomSource = None) -> random.Random:
    """
    Normalize a random source.

    Args:
        rng: An existing ``random.Random`` (returned as is), an integer seed,
            or None for a fresh unseeded generator
    """
    if isinstance(rng, random.Random):
        return rng
    if rng is None:
        return random.Random()
    if isinstance(rng, int) and not isinstance(rng, bool):
        return random.Random(rng)
    raise ConfigurationError(parameter_name="rng", provided_value=rng, expected_type=random.Random)


def derive_seed(rng: random.Random) -> int:
    """Draw a 32-bit seed for an independent child generator."""
    return rng.getrandbits(32)
