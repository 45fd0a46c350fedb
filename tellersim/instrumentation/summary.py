"""Summary of one completed simulation run.

SimulationSummary keeps the raw run totals and derives averages on demand.
It is returned by Simulation.run() and also accessible via
Simulation.summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tellersim.core.errors import NoCustomersError


@dataclass(frozen=True)
class SimulationSummary:
    """Totals of one run.

    Attributes:
        total_time: Simulated minutes.
        total_customers: Customers that arrived in the window.
        total_servers: Size of the server pool.
        total_wait_time: Sum of customer wait minutes.
        total_service_time: Sum of customer service minutes.
    """

    total_time: int
    total_customers: int
    total_servers: int
    total_wait_time: int
    total_service_time: int

    @property
    def is_empty(self) -> bool:
        return self.total_customers == 0

    @property
    def average_wait_time(self) -> float:
        """Mean wait in minutes. Raises NoCustomersError for an empty run."""
        return self._per_customer(self.total_wait_time, "wait time")

    @property
    def average_service_time(self) -> float:
        """Mean service in minutes. Raises NoCustomersError for an empty run."""
        return self._per_customer(self.total_service_time, "service time")

    @property
    def customers_per_hour(self) -> float:
        return self.total_customers / (self.total_time / 60)

    def _per_customer(self, total: int, what: str) -> float:
        if self.total_customers == 0:
            raise NoCustomersError(
                f"average {what} is undefined: no customers arrived in {self.total_time} minutes"
            )
        return total / self.total_customers

    def __str__(self) -> str:
        if self.is_empty:
            wait = service = "n/a"
        else:
            wait = f"{self.average_wait_time:.6f} minutes"
            service = f"{self.average_service_time:.6f} minutes"
        lines = [
            f"Simulation Time    : {self.total_time // 60} hours",
            f"Total Customers    : {self.total_customers} ({self.customers_per_hour:.6f} customers/hour)",
            f"Total Servers      : {self.total_servers}",
            f"Average WaitTime   : {wait}",
            f"Average ServiceTime: {service}",
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_time": self.total_time,
            "total_customers": self.total_customers,
            "total_servers": self.total_servers,
            "average_wait_time": None if self.is_empty else self.average_wait_time,
            "average_service_time": None if self.is_empty else self.average_service_time,
        }
