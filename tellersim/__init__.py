"""tellersim: finite-horizon simulation of a multi-teller bank queue.

Estimates mean customer wait as a function of run length and server count,
for comparison with steady-state M/M/c theory.
"""

import logging

from tellersim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
)

logging.getLogger("tellersim").addHandler(logging.NullHandler())

from tellersim.analysis import erlang_c, steady_state_wait, utilization
from tellersim.core import (
    Customer,
    NoCustomersError,
    ServerPool,
    Simulation,
    SimulationConfig,
    simulate,
)
from tellersim.distributions import BoundedPoisson, ExponentialInterval
from tellersim.experiments import ReplicationResult, ZeroRunPolicy, replicate, sweep
from tellersim.instrumentation import SimulationSummary

__version__ = "0.1.0"

__all__ = [
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    # Core
    "Customer",
    "NoCustomersError",
    "ServerPool",
    "Simulation",
    "SimulationConfig",
    "SimulationSummary",
    "simulate",
    # Distributions
    "BoundedPoisson",
    "ExponentialInterval",
    # Experiments
    "ReplicationResult",
    "ZeroRunPolicy",
    "replicate",
    "sweep",
    # Analysis
    "erlang_c",
    "steady_state_wait",
    "utilization",
]
