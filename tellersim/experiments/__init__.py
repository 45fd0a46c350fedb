"""Repeated runs and parameter sweeps built on the simulation engine."""

from tellersim.experiments.replication import (
    ReplicationResult,
    ZeroRunPolicy,
    aggregate,
    derive_seeds,
    replicate,
    run_replications,
)
from tellersim.experiments.sweep import (
    DEFAULT_HOURS,
    DEFAULT_SERVERS,
    repetitions_for,
    sweep,
    write_csv,
)

__all__ = [
    "DEFAULT_HOURS",
    "DEFAULT_SERVERS",
    "ReplicationResult",
    "ZeroRunPolicy",
    "aggregate",
    "derive_seeds",
    "repetitions_for",
    "replicate",
    "run_replications",
    "sweep",
    "write_csv",
]
