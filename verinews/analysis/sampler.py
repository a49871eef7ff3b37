"""Banded random sampling with an injectable random source.

Every randomized figure the engine reports is drawn through a BandSampler,
so pinning the seed of its random.Random pins every reported value.
"""

import random
from typing import Optional, Tuple

Band = Tuple[float, float]


class BandSampler:
    """
    Draws uniform values from fixed numeric bands.

    Usage:
        sampler = BandSampler(random.Random(42))
        value = sampler.sample_band((60.0, 85.0))
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def unit(self) -> float:
        """Uniform value on [0, 1)."""
        return self.rng.random()

    def sample_band(self, band: Band) -> float:
        """Uniform value on [low, high]."""
        low, high = band
        if low > high:
            raise ValueError(f"Invalid band: low={low} > high={high}")
        return self.rng.uniform(low, high)

    def randint(self, low: int, high: int) -> int:
        """Uniform integer on [low, high]."""
        return self.rng.randint(low, high)


__all__ = ["Band", "BandSampler"]
