"""Minute-stepped simulation of a multi-server teller queue.

The engine advances the clock one integer minute at a time. Each minute it
draws a batch of arrivals from a truncated Poisson sampler and resolves
every arriving customer immediately: the customer goes to the earliest
available server, that server's own exponential sampler decides the service
length, and the server's idle time moves to the customer's finish time.
There is no event queue and no end-of-day cutoff, so customers arriving
near the end of the window may finish after it.

Every random stream is derived from the config seed, which makes a run a
pure function of its SimulationConfig.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable

from tellersim.core.config import SimulationConfig
from tellersim.core.customer import Customer
from tellersim.core.server_pool import ServerPool
from tellersim.distributions import BoundedPoisson, ExponentialInterval
from tellersim.instrumentation.summary import SimulationSummary

logger = logging.getLogger(__name__)

MAX_SEED = 2**63 - 1

CustomerHook = Callable[[Customer], None]


def derive_stream_seeds(seed: int, servers: int) -> tuple[int, list[int]]:
    """Derive the arrival seed and one seed per server from a run seed.

    A parent generator seeded with the run seed emits the arrival stream's
    seed first and then the server seeds in index order.
    """
    parent = random.Random(seed)
    arrival_seed = parent.randint(0, MAX_SEED)
    server_seeds = [parent.randint(0, MAX_SEED) for _ in range(servers)]
    return arrival_seed, server_seeds


def round_minutes(duration: float) -> int:
    """Round a non-negative duration to whole minutes, halves rounding up."""
    return math.floor(duration + 0.5)


class Simulation:
    """One run of the teller queue.

    A Simulation owns its samplers and server pool and can be run once.

    Args:
        config: Run parameters.

    Example:
        sim = Simulation(SimulationConfig.bank_day(seed=2021))
        summary = sim.run()
        print(summary.average_wait_time)
    """

    def __init__(self, config: SimulationConfig):
        self.config = config

        arrival_seed, server_seeds = derive_stream_seeds(config.seed, config.servers)
        self._arrivals = BoundedPoisson(
            rate=config.arrivals_per_minute,
            max_count=config.max_arrivals_per_minute,
            seed=arrival_seed,
        )
        self._service = [
            ExponentialInterval(
                rate=config.service_rate_per_minute,
                seed=server_seed,
                method=config.service_sampling,
            )
            for server_seed in server_seeds
        ]
        self._pool = ServerPool(config.servers)

        self.steps: int = 0
        self.summary: SimulationSummary | None = None
        self._started = False

    @property
    def server_idle_times(self) -> tuple[int, ...]:
        return self._pool.idle_times

    def run(self, on_customer: CustomerHook | None = None) -> SimulationSummary:
        """Simulate every minute of the window and summarize the result.

        Args:
            on_customer: Called with each customer, in arrival order, as soon
                as the customer is resolved.

        Raises:
            RuntimeError: If run() was called before, including a call that
                raised part way through.
        """
        if self._started:
            raise RuntimeError("Simulation has already run; create a new one to run again")
        self._started = True

        config = self.config
        logger.debug(
            "Simulation started: minutes %d..%d servers=%d customer_rate=%.4f/h service_rate=%.4f/h seed=%d",
            config.start_time,
            config.end_time,
            config.servers,
            config.customer_rate,
            config.service_rate,
            config.seed,
        )

        trace = logger.isEnabledFor(logging.DEBUG)
        customers = 0
        total_wait = 0
        total_service = 0

        for minute in range(config.start_time, config.end_time):
            for _ in range(self._arrivals.next()):
                customers += 1
                server, served_time = self._pool.select(minute)
                service_time = round_minutes(self._service[server].next())
                customer = Customer(
                    index=customers,
                    arrival_time=minute,
                    served_time=served_time,
                    finish_time=served_time + service_time,
                    server=server,
                )
                self._pool.occupy(server, customer.finish_time)

                total_wait += customer.wait_time
                total_service += customer.service_time

                if trace:
                    logger.debug(
                        "Customer %d: arrival=%d served=%d by server %d wait=%d service=%d",
                        customer.index,
                        customer.arrival_time,
                        customer.served_time,
                        customer.server,
                        customer.wait_time,
                        customer.service_time,
                    )
                if on_customer is not None:
                    on_customer(customer)
            self.steps += 1

        self.summary = SimulationSummary(
            total_time=config.duration,
            total_customers=customers,
            total_servers=config.servers,
            total_wait_time=total_wait,
            total_service_time=total_service,
        )
        if self.summary.is_empty:
            logger.debug("Simulation finished with no customers after %d minutes", self.steps)
        else:
            logger.debug(
                "Simulation finished: customers=%d avg_wait=%.4f avg_service=%.4f",
                customers,
                self.summary.average_wait_time,
                self.summary.average_service_time,
            )
        return self.summary


def simulate(config: SimulationConfig, on_customer: CustomerHook | None = None) -> SimulationSummary:
    """Build a Simulation for config and run it."""
    return Simulation(config).run(on_customer=on_customer)
