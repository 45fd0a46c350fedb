"""Plots of sweep results. Requires matplotlib."""

from tellersim.visual.convergence import plot_convergence

__all__ = [
    "plot_convergence",
]
