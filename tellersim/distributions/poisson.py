"""Truncated Poisson sampler for per-minute arrival counts.

BoundedPoisson precomputes the probability mass for counts 0..N and samples
by walking the cumulative sum until it reaches a uniform draw. Mass beyond N
is folded into N, so N must be large relative to the rate.
"""

import logging
import math
import random

logger = logging.getLogger(__name__)

# Bound is considered safe when it sits this many standard deviations above the mean.
SAFE_BOUND_SIGMAS = 6.0


class BoundedPoisson:
    """Poisson count sampler truncated to [0, max_count].

    Args:
        rate: Expected number of events per time unit. Must be >= 0.
        max_count: Truncation bound N. Must be >= 0.
        seed: Seed for this sampler's own random stream.

    Example:
        arrivals = BoundedPoisson(rate=5.8 / 60, max_count=100, seed=2021)
        k = arrivals.next()  # customers arriving this minute
    """

    def __init__(self, rate: float, max_count: int = 100, seed: int | None = None):
        if rate < 0 or math.isnan(rate):
            raise ValueError(f"rate must be non-negative, got {rate}")
        if max_count < 0:
            raise ValueError(f"max_count must be non-negative, got {max_count}")

        self._rate = float(rate)
        self._max_count = int(max_count)
        self._rng = random.Random(seed)

        mass = [math.exp(-self._rate)]
        for i in range(1, self._max_count + 1):
            mass.append(mass[-1] * self._rate / i)
        self._probabilities = tuple(mass)

        safe_bound = self._rate + SAFE_BOUND_SIGMAS * math.sqrt(self._rate)
        if self._max_count < safe_bound:
            logger.warning(
                "Poisson bound %d is small for rate %.4f (tail mass %.3g); samples are biased low",
                self._max_count,
                self._rate,
                self.tail_mass,
            )

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def max_count(self) -> int:
        return self._max_count

    @property
    def probabilities(self) -> tuple[float, ...]:
        """Probability mass for counts 0..max_count."""
        return self._probabilities

    @property
    def tail_mass(self) -> float:
        """Probability of a count above max_count, clamped to be non-negative."""
        return max(0.0, 1.0 - math.fsum(self._probabilities))

    def next(self) -> int:
        """Sample the number of events in one time unit."""
        x = self._rng.random()
        cumulative = 0.0
        for count, p in enumerate(self._probabilities):
            cumulative += p
            if cumulative >= x:
                return count
        return self._max_count

    def __repr__(self) -> str:
        return f"BoundedPoisson(rate={self._rate}, max_count={self._max_count})"
