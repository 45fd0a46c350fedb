"""Customer record produced by the simulation engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """One fully resolved customer.

    Customers are created and assigned in the minute they arrive, so every
    field is known at construction time. All times are integer minutes on
    the simulation clock.

    Attributes:
        index: 1-based arrival order within the run.
        arrival_time: Minute the customer arrived.
        served_time: Minute service began.
        finish_time: Minute service ended.
        server: Index of the server that handled the customer.
    """

    index: int
    arrival_time: int
    served_time: int
    finish_time: int
    server: int

    def __post_init__(self) -> None:
        if not 0 <= self.arrival_time <= self.served_time <= self.finish_time:
            raise ValueError(
                "customer times must satisfy 0 <= arrival <= served <= finish, got "
                f"{self.arrival_time}, {self.served_time}, {self.finish_time}"
            )
        if self.server < 0:
            raise ValueError(f"server must be non-negative, got {self.server}")

    @property
    def wait_time(self) -> int:
        return self.served_time - self.arrival_time

    @property
    def service_time(self) -> int:
        return self.finish_time - self.served_time

    @property
    def spent_time(self) -> int:
        """Total time in the bank, waiting plus service."""
        return self.finish_time - self.arrival_time
