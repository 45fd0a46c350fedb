"""Averaging repeated runs of one configuration.

Short windows produce noisy averages, and some runs may see no customers at
all. replicate() runs the same configuration under independent child seeds
and averages the per-run means. How empty runs enter the average is chosen
with ZeroRunPolicy:

- EXCLUDE: empty runs are left out of both the sums and the divisor of
  the wait and service averages.
- AS_ZERO: empty runs are left out of the sums but still counted in the
  divisor, as the grid report always did. This biases short
  windows toward zero.

The mean customer count divides by every run under both policies.
"""

from __future__ import annotations

import logging
import multiprocessing
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tellersim.core.config import SimulationConfig
from tellersim.core.errors import NoCustomersError
from tellersim.core.simulation import MAX_SEED, simulate
from tellersim.instrumentation.summary import SimulationSummary

logger = logging.getLogger(__name__)


class ZeroRunPolicy(Enum):
    EXCLUDE = "exclude"
    AS_ZERO = "as-zero"


@dataclass(frozen=True)
class ReplicationResult:
    """Averages over the repetitions of one configuration.

    Attributes:
        total_time: Simulated minutes per run.
        total_servers: Server count.
        repetitions: Number of runs performed.
        contributing_runs: Runs that had at least one customer.
        average_customers: Mean customers per run.
        average_wait_time: Mean of the per-run average wait, in minutes.
        average_service_time: Mean of the per-run average service, in minutes.
        policy: How empty runs were counted.
    """

    total_time: int
    total_servers: int
    repetitions: int
    contributing_runs: int
    average_customers: float
    average_wait_time: float
    average_service_time: float
    policy: ZeroRunPolicy

    @property
    def skipped_runs(self) -> int:
        return self.repetitions - self.contributing_runs

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_time": self.total_time,
            "total_servers": self.total_servers,
            "repetitions": self.repetitions,
            "contributing_runs": self.contributing_runs,
            "average_customers": self.average_customers,
            "average_wait_time": self.average_wait_time,
            "average_service_time": self.average_service_time,
            "policy": self.policy.value,
        }


def derive_seeds(seed: int | None, count: int) -> list[int]:
    """Child seeds for count runs, drawn in order from one parent generator."""
    rng = random.Random(seed)
    return [rng.randint(0, MAX_SEED) for _ in range(count)]


def _run_one(config: SimulationConfig) -> SimulationSummary:
    return simulate(config)


def run_replications(
    config: SimulationConfig,
    seeds: list[int],
    processes: int = 1,
) -> list[SimulationSummary]:
    """Run config once per seed and return the summaries in seed order.

    With processes > 1 the runs are spread over a multiprocessing pool.
    Each run owns its random streams, so the summaries do not depend on
    the number of processes.
    """
    if processes < 1:
        raise ValueError(f"processes must be positive, got {processes}")

    configs = [config.replace(seed=seed) for seed in seeds]
    if processes == 1 or len(configs) < 2:
        return [_run_one(c) for c in configs]

    with multiprocessing.Pool(processes=processes) as pool:
        return pool.map(_run_one, configs)


def aggregate(
    summaries: list[SimulationSummary],
    policy: ZeroRunPolicy = ZeroRunPolicy.EXCLUDE,
) -> ReplicationResult:
    """Average per-run summaries of the same configuration.

    Raises:
        ValueError: If summaries is empty.
        NoCustomersError: If every run was empty and policy is EXCLUDE.
    """
    if not summaries:
        raise ValueError("summaries must not be empty")

    first = summaries[0]
    repetitions = len(summaries)
    customers = 0
    wait = 0.0
    service = 0.0
    contributing = 0
    for summary in summaries:
        if summary.is_empty:
            continue
        contributing += 1
        customers += summary.total_customers
        wait += summary.average_wait_time
        service += summary.average_service_time

    if policy is ZeroRunPolicy.EXCLUDE:
        if contributing == 0:
            raise NoCustomersError(
                f"none of {repetitions} runs of {first.total_time} minutes had customers"
            )
        divisor = contributing
    else:
        divisor = repetitions

    if contributing < repetitions:
        logger.debug(
            "%d of %d runs had no customers (policy=%s)",
            repetitions - contributing,
            repetitions,
            policy.value,
        )

    return ReplicationResult(
        total_time=first.total_time,
        total_servers=first.total_servers,
        repetitions=repetitions,
        contributing_runs=contributing,
        average_customers=customers / repetitions,
        average_wait_time=wait / divisor,
        average_service_time=service / divisor,
        policy=policy,
    )


def replicate(
    config: SimulationConfig,
    repetitions: int,
    seed: int | None = None,
    policy: ZeroRunPolicy = ZeroRunPolicy.EXCLUDE,
    processes: int = 1,
) -> ReplicationResult:
    """Run config repeatedly under derived seeds and average the results.

    Args:
        config: Configuration to repeat. Its own seed is replaced per run.
        repetitions: Number of runs.
        seed: Parent seed for the child seeds. Defaults to config.seed.
        policy: How runs without customers are counted.
        processes: Worker processes; 1 runs in the calling process.

    Raises:
        ValueError: If repetitions or processes is not positive.
        NoCustomersError: If no run had customers and policy is EXCLUDE.
    """
    if repetitions < 1:
        raise ValueError(f"repetitions must be positive, got {repetitions}")

    seeds = derive_seeds(config.seed if seed is None else seed, repetitions)
    summaries = run_replications(config, seeds, processes=processes)
    result = aggregate(summaries, policy=policy)

    logger.info(
        "Replicated %d x %d minutes with %d server(s): avg_wait=%.4f (%d empty runs)",
        repetitions,
        config.duration,
        config.servers,
        result.average_wait_time,
        result.skipped_runs,
    )
    return result
