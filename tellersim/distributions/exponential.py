"""Exponentially distributed intervals sampled by inverting the CDF.

ExponentialInterval draws r uniformly in [0, 1) and returns the t with
F(t) = 1 - e^(-rate * t) = r. The default method finds t by bisection on
[0, upper_bound]; the "inverse" method uses the closed form -ln(1 - r) / rate.
Both agree to within the bisection tolerance for the same draw.
"""

import logging
import math
import random

from tellersim.numerics import bisect

logger = logging.getLogger(__name__)

SAMPLING_METHODS = ("bisect", "inverse")


class ExponentialInterval:
    """Exponential interval sampler with its own random stream.

    Args:
        rate: Inverse of the mean interval. Must be > 0.
        seed: Seed for this sampler's own random stream.
        method: "bisect" (default) or "inverse".
        upper_bound: Upper end of the bisection bracket.
        tolerance: Bracket width at which bisection stops.
    """

    def __init__(
        self,
        rate: float,
        seed: int | None = None,
        method: str = "bisect",
        upper_bound: float = 1e100,
        tolerance: float = 1e-6,
    ):
        if not rate > 0:
            raise ValueError(f"rate must be positive, got {rate}")
        if method not in SAMPLING_METHODS:
            raise ValueError(f"method must be one of {SAMPLING_METHODS}, got {method!r}")
        if not upper_bound > 0:
            raise ValueError(f"upper_bound must be positive, got {upper_bound}")
        if not tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")

        self._rate = float(rate)
        self._method = method
        self._upper_bound = float(upper_bound)
        self._tolerance = float(tolerance)
        self._rng = random.Random(seed)

        logger.debug(
            "ExponentialInterval created: rate=%.6f mean=%.4f method=%s",
            self._rate,
            self.mean,
            self._method,
        )

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def mean(self) -> float:
        return 1.0 / self._rate

    @property
    def method(self) -> str:
        return self._method

    def cdf(self, t: float) -> float:
        return 1.0 - math.exp(-self._rate * t)

    def next(self) -> float:
        """Sample one non-negative interval."""
        r = self._rng.random()
        if self._method == "inverse":
            return -math.log(1.0 - r) / self._rate

        result = bisect(
            lambda t: self.cdf(t) - r,
            0.0,
            self._upper_bound,
            xtol=self._tolerance,
        )
        return result.root

    def __repr__(self) -> str:
        return f"ExponentialInterval(rate={self._rate}, method={self._method!r})"
