"""Seeded random variate generators for arrivals and service times."""

from tellersim.distributions.exponential import ExponentialInterval
from tellersim.distributions.poisson import BoundedPoisson

__all__ = [
    "BoundedPoisson",
    "ExponentialInterval",
]
