"""Analytical reference values for comparing against simulated results.

- **theory**: Steady-state M/M/c waiting times (Erlang C)
"""

from tellersim.analysis.theory import erlang_c, steady_state_wait, utilization

__all__ = [
    "erlang_c",
    "steady_state_wait",
    "utilization",
]
