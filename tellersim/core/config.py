"""Immutable configuration for a single simulation run."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from tellersim.distributions.exponential import SAMPLING_METHODS

MINUTES_PER_HOUR = 60


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one run of the teller queue.

    Times are integer minutes on the simulation clock; rates are per hour.

    Attributes:
        start_time: First simulated minute (inclusive).
        end_time: Last simulated minute (exclusive).
        servers: Number of identical servers.
        customer_rate: Expected customer arrivals per hour. Zero disables arrivals.
        service_rate: Customers one server completes per hour.
        seed: Seed from which every random stream of the run is derived.
        max_arrivals_per_minute: Truncation bound of the arrival count sampler.
        service_sampling: "bisect" or "inverse" service time sampling.
    """

    start_time: int
    end_time: int
    servers: int
    customer_rate: float
    service_rate: float
    seed: int = 0
    max_arrivals_per_minute: int = 100
    service_sampling: str = "bisect"

    def __post_init__(self) -> None:
        _require_int("start_time", self.start_time)
        _require_int("end_time", self.end_time)
        _require_int("servers", self.servers)
        _require_int("seed", self.seed)
        _require_int("max_arrivals_per_minute", self.max_arrivals_per_minute)

        if self.start_time < 0:
            raise ValueError(f"start_time must be non-negative, got {self.start_time}")
        if self.end_time <= self.start_time:
            raise ValueError(
                f"end_time must be after start_time, got {self.start_time}..{self.end_time}"
            )
        if self.servers < 1:
            raise ValueError(f"servers must be positive, got {self.servers}")
        if not (self.customer_rate >= 0 and math.isfinite(self.customer_rate)):
            raise ValueError(f"customer_rate must be non-negative, got {self.customer_rate}")
        if not (self.service_rate > 0 and math.isfinite(self.service_rate)):
            raise ValueError(f"service_rate must be positive, got {self.service_rate}")
        if self.max_arrivals_per_minute < 0:
            raise ValueError(
                f"max_arrivals_per_minute must be non-negative, got {self.max_arrivals_per_minute}"
            )
        if self.service_sampling not in SAMPLING_METHODS:
            raise ValueError(
                f"service_sampling must be one of {SAMPLING_METHODS}, got {self.service_sampling!r}"
            )

    @property
    def duration(self) -> int:
        """Number of simulated minutes."""
        return self.end_time - self.start_time

    @property
    def arrivals_per_minute(self) -> float:
        return self.customer_rate / MINUTES_PER_HOUR

    @property
    def service_rate_per_minute(self) -> float:
        return self.service_rate / MINUTES_PER_HOUR

    def replace(self, **changes) -> SimulationConfig:
        """Return a copy with the given fields changed, validated again."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def bank_day(cls, seed: int = 2021, servers: int = 2) -> SimulationConfig:
        """A business day from 08:00 to 16:00 at 5.8 arrivals and 6 services per hour."""
        return cls(
            start_time=8 * MINUTES_PER_HOUR,
            end_time=16 * MINUTES_PER_HOUR,
            servers=servers,
            customer_rate=5.8,
            service_rate=6.0,
            seed=seed,
        )


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
