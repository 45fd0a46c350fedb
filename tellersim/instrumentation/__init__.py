"""Run-level statistics."""

from tellersim.instrumentation.summary import SimulationSummary

__all__ = [
    "SimulationSummary",
]
