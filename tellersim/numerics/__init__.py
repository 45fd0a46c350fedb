"""Numerical methods for sampling computations.

Pure Python bisection root finding, used for inverse-CDF sampling.
"""

from tellersim.numerics.root_finding import RootResult, bisect

__all__ = [
    "RootResult",
    "bisect",
]
