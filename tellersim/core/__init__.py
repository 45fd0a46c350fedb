"""Simulation engine and its value types."""

from tellersim.core.config import SimulationConfig
from tellersim.core.customer import Customer
from tellersim.core.errors import NoCustomersError
from tellersim.core.server_pool import ServerPool
from tellersim.core.simulation import Simulation, derive_stream_seeds, simulate

__all__ = [
    "Customer",
    "NoCustomersError",
    "ServerPool",
    "Simulation",
    "SimulationConfig",
    "derive_stream_seeds",
    "simulate",
]
