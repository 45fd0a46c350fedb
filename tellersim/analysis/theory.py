"""Steady-state M/M/c results.

These are the infinite-horizon values a finite simulation is compared
against. With offered load a = lambda / mu and utilization
rho = a / c < 1, the Erlang C probability that an arrival has to wait is

    Pw = (a^c / c!) * (c / (c - a)) / (sum_{n<c} a^n / n! + (a^c / c!) * (c / (c - a)))

and the mean wait in queue is Wq = Pw / (c * mu - lambda).
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


def _validate(arrival_rate: float, service_rate: float, servers: int) -> None:
    if arrival_rate < 0:
        raise ValueError(f"arrival_rate must be non-negative, got {arrival_rate}")
    if service_rate <= 0:
        raise ValueError(f"service_rate must be positive, got {service_rate}")
    if servers < 1:
        raise ValueError(f"servers must be positive, got {servers}")


def utilization(arrival_rate: float, service_rate: float, servers: int) -> float:
    """Fraction of server capacity in use, lambda / (c * mu)."""
    _validate(arrival_rate, service_rate, servers)
    return arrival_rate / (servers * service_rate)


def erlang_c(arrival_rate: float, service_rate: float, servers: int) -> float:
    """Probability that an arriving customer waits. 1.0 for an unstable system."""
    rho = utilization(arrival_rate, service_rate, servers)
    if rho >= 1:
        return 1.0

    a = arrival_rate / service_rate
    s = 0.0
    for n in range(servers):
        s += (a**n) / math.factorial(n)
    last = (a**servers) / math.factorial(servers) * (servers / (servers - a))
    return last / (s + last)


def steady_state_wait(arrival_rate: float, service_rate: float, servers: int) -> float:
    """Mean steady-state wait in queue, in minutes.

    Args:
        arrival_rate: Customer arrivals per hour.
        service_rate: Customers served per hour by one server.
        servers: Number of servers.

    Returns:
        Wq in minutes, or inf when arrival_rate >= servers * service_rate.
    """
    rho = utilization(arrival_rate, service_rate, servers)
    if rho >= 1:
        logger.warning(
            "Unstable system (utilization %.3f): steady-state wait is infinite", rho
        )
        return math.inf

    pw = erlang_c(arrival_rate, service_rate, servers)
    wait_hours = pw / (servers * service_rate - arrival_rate)
    return wait_hours * 60
