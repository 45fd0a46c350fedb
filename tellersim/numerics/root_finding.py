"""Root finding by bisection.

Used for inverse-CDF sampling of continuous distributions.
"""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class RootResult:
    """Result of root finding.

    Attributes:
        root: The found root value.
        converged: Whether the bracket shrank below the tolerance.
        iterations: Number of halvings performed.
        function_calls: Number of function evaluations.
    """

    root: float
    converged: bool
    iterations: int
    function_calls: int


def bisect(
    f: Callable[[float], float],
    a: float,
    b: float,
    xtol: float = 1e-6,
    maxiter: int = 2000,
) -> RootResult:
    """Find the root of a non-decreasing f in [a, b] by bisection.

    The bracket is halved while its width exceeds xtol. When f(mid) < 0 the
    root lies above mid and a moves up, otherwise b moves down. The returned
    root is the midpoint of the final bracket, so it lies within xtol / 2 of
    the true root.

    Args:
        f: Non-decreasing function with f(a) <= 0 <= f(b).
        a: Lower bracket bound.
        b: Upper bracket bound.
        xtol: Width at which the bracket is considered converged.
        maxiter: Maximum number of halvings.

    Returns:
        RootResult with the midpoint and convergence info.

    Raises:
        ValueError: If the bracket or tolerance is invalid.
    """
    if not a < b:
        raise ValueError(f"bracket must satisfy a < b, got a={a}, b={b}")
    if xtol <= 0:
        raise ValueError(f"xtol must be positive, got {xtol}")

    fa = f(a)
    fb = f(b)
    func_calls = 2
    if fa > 0 or fb < 0:
        raise ValueError(
            f"f must satisfy f(a) <= 0 <= f(b), got f({a})={fa}, f({b})={fb}"
        )

    iterations = 0
    while b - a > xtol:
        if iterations >= maxiter:
            return RootResult(
                root=(a + b) * 0.5,
                converged=False,
                iterations=iterations,
                function_calls=func_calls,
            )
        mid = (a + b) * 0.5
        fm = f(mid)
        func_calls += 1
        iterations += 1
        if fm < 0:
            a = mid
        else:
            b = mid

    return RootResult(
        root=(a + b) * 0.5,
        converged=True,
        iterations=iterations,
        function_calls=func_calls,
    )
