"""Grid sweep over run length and server count.

For every (hours, servers) pair the sweep replicates a run of that many
hours, using more repetitions for short windows so that each grid point
covers roughly the same number of simulated hours. The result is a pandas
DataFrame with one row per grid point, next to the steady-state wait for
the same rates.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from tellersim.analysis.theory import steady_state_wait
from tellersim.core.config import MINUTES_PER_HOUR, SimulationConfig
from tellersim.core.simulation import MAX_SEED
from tellersim.experiments.replication import ZeroRunPolicy, replicate

logger = logging.getLogger(__name__)

DEFAULT_HOURS: tuple[int, ...] = (
    1, 2, 5, 10, 20, 50, 100, 200, 500, 1_000, 2_000, 5_000,
    10_000, 20_000, 50_000, 100_000, 200_000, 500_000, 1_000_000,
)
DEFAULT_SERVERS: tuple[int, ...] = (1, 2)
DEFAULT_BUDGET_HOURS = 1_000

COLUMNS = [
    "total_time",
    "total_servers",
    "total_customers",
    "customer_rate",
    "server_rate",
    "actual_customer_rate",
    "actual_server_rate",
    "average_wait_time",
    "theoretical_wait_time",
]


def repetitions_for(hours: int, budget_hours: int = DEFAULT_BUDGET_HOURS) -> int:
    """Repetitions for a window of the given length, at least one."""
    if hours < 1:
        raise ValueError(f"hours must be positive, got {hours}")
    return max(1, budget_hours // hours)


def sweep(
    hours: Sequence[int] = DEFAULT_HOURS,
    servers: Sequence[int] = DEFAULT_SERVERS,
    customer_rate: float = 5.8,
    service_rate: float = 6.0,
    seed: int | None = 2021,
    policy: ZeroRunPolicy = ZeroRunPolicy.EXCLUDE,
    processes: int = 1,
    budget_hours: int = DEFAULT_BUDGET_HOURS,
    service_sampling: str = "bisect",
) -> pd.DataFrame:
    """Simulate every (hours, servers) combination.

    Grid points are visited hours-major and each draws its seed from one
    parent generator in that order, so the whole table is determined by
    seed.

    Returns:
        DataFrame with the columns in COLUMNS, one row per grid point.
    """
    rng = random.Random(seed)
    rows = []
    for window in hours:
        repetitions = repetitions_for(window, budget_hours)
        for server_count in servers:
            config = SimulationConfig(
                start_time=0,
                end_time=window * MINUTES_PER_HOUR,
                servers=server_count,
                customer_rate=customer_rate,
                service_rate=service_rate,
                service_sampling=service_sampling,
            )
            result = replicate(
                config,
                repetitions,
                seed=rng.randint(0, MAX_SEED),
                policy=policy,
                processes=processes,
            )
            service_mean = result.average_service_time
            rows.append({
                "total_time": window,
                "total_servers": server_count,
                "total_customers": round(result.average_customers),
                "customer_rate": customer_rate,
                "server_rate": service_rate,
                "actual_customer_rate": result.average_customers / window,
                "actual_server_rate": MINUTES_PER_HOUR / service_mean if service_mean > 0 else math.inf,
                "average_wait_time": result.average_wait_time,
                "theoretical_wait_time": steady_state_wait(customer_rate, service_rate, server_count),
            })
            logger.debug("Grid point %dh x %d server(s) done", window, server_count)

    logger.info("Sweep finished: %d grid points", len(rows))
    return pd.DataFrame(rows, columns=COLUMNS)


def write_csv(frame: pd.DataFrame, path: str | Path | None = None) -> str | None:
    """Write a sweep table as CSV with four-decimal floats.

    Returns the CSV text when path is None, otherwise writes the file.
    """
    if path is not None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
    return frame.to_csv(path, index=False, float_format="%.4f")
