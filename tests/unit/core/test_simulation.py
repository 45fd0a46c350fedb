"""Unit tests for the minute-stepped Simulation engine."""

from __future__ import annotations

import pytest

from tellersim.core import Customer, NoCustomersError, Simulation, SimulationConfig, simulate
from tellersim.core.simulation import derive_stream_seeds, round_minutes


def _run(config: SimulationConfig) -> tuple[list[Customer], Simulation]:
    customers: list[Customer] = []
    sim = Simulation(config)
    sim.run(on_customer=customers.append)
    return customers, sim


def _busy_config(**overrides) -> SimulationConfig:
    params = dict(start_time=0, end_time=600, servers=3, customer_rate=30.0, service_rate=8.0, seed=5)
    params.update(overrides)
    return SimulationConfig(**params)


class TestSeedDerivation:

    def test_deterministic(self):
        assert derive_stream_seeds(2021, 3) == derive_stream_seeds(2021, 3)

    def test_one_seed_per_server(self):
        arrival_seed, server_seeds = derive_stream_seeds(2021, 4)

        assert len(server_seeds) == 4
        assert len({arrival_seed, *server_seeds}) == 5

    def test_adding_servers_keeps_existing_streams(self):
        """Server seeds are drawn in index order, so a larger pool extends a smaller one."""
        arrival_2, servers_2 = derive_stream_seeds(7, 2)
        arrival_3, servers_3 = derive_stream_seeds(7, 3)

        assert arrival_2 == arrival_3
        assert servers_3[:2] == servers_2


class TestRoundMinutes:

    @pytest.mark.parametrize(
        "duration, expected",
        [(0.0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3), (9.4999, 9), (12.7, 13)],
    )
    def test_halves_round_up(self, duration, expected):
        assert round_minutes(duration) == expected


class TestSimulationDeterminism:

    def test_same_seed_same_customers(self, bank_day):
        first, _ = _run(bank_day)
        second, _ = _run(bank_day)

        assert first == second

    def test_same_seed_same_summary(self, bank_day):
        assert simulate(bank_day) == simulate(bank_day)

    def test_different_seed_different_customers(self, bank_day):
        first, _ = _run(bank_day)
        second, _ = _run(bank_day.replace(seed=2022))

        assert first != second

    def test_inverse_sampling_is_deterministic(self, bank_day):
        config = bank_day.replace(service_sampling="inverse")

        assert _run(config)[0] == _run(config)[0]

    def test_sampling_methods_agree(self, bank_day):
        """Both service samplers invert the same draws, so rounded minutes match."""
        bisected, _ = _run(bank_day)
        inverted, _ = _run(bank_day.replace(service_sampling="inverse"))

        assert bisected == inverted


class TestSimulationInvariants:

    def test_customer_time_ordering(self):
        customers, _ = _run(_busy_config())

        assert customers
        for c in customers:
            assert c.arrival_time <= c.served_time <= c.finish_time

    def test_arrivals_fall_inside_window(self):
        config = _busy_config(start_time=120, end_time=300)
        customers, _ = _run(config)

        assert all(120 <= c.arrival_time < 300 for c in customers)
        assert [c.arrival_time for c in customers] == sorted(c.arrival_time for c in customers)

    def test_indices_count_every_arrival(self):
        customers, sim = _run(_busy_config())

        assert [c.index for c in customers] == list(range(1, len(customers) + 1))
        assert sim.summary.total_customers == len(customers)

    def test_earliest_available_server_is_chosen(self):
        """Replay the idle times and check every choice against a full scan."""
        config = _busy_config()
        customers, sim = _run(config)

        idle = [0] * config.servers
        for c in customers:
            effective = [max(t, c.arrival_time) for t in idle]
            best = min(effective)
            assert c.served_time == best
            assert c.server == effective.index(best)
            assert c.served_time >= idle[c.server]
            idle[c.server] = c.finish_time

        assert tuple(idle) == sim.server_idle_times

    def test_single_server_serves_in_order(self):
        config = _busy_config(servers=1, customer_rate=5.8, service_rate=6.0)
        customers, _ = _run(config)

        previous_finish = 0
        for c in customers:
            assert c.server == 0
            assert c.served_time == max(previous_finish, c.arrival_time)
            previous_finish = c.finish_time

    def test_totals_match_customers(self):
        customers, sim = _run(_busy_config())
        summary = sim.summary

        assert summary.total_wait_time == sum(c.wait_time for c in customers)
        assert summary.total_service_time == sum(c.service_time for c in customers)
        assert summary.average_wait_time == pytest.approx(
            sum(c.wait_time for c in customers) / len(customers)
        )

    def test_service_may_spill_past_window(self):
        """Customers who arrive late are still served after end_time."""
        config = _busy_config(customer_rate=60.0, service_rate=2.0, servers=1, end_time=60)
        customers, _ = _run(config)

        assert max(c.finish_time for c in customers) > config.end_time


class TestSimulationRun:

    def test_summary_none_before_run(self, bank_day):
        sim = Simulation(bank_day)

        assert sim.summary is None
        assert sim.steps == 0

    def test_summary_accessible_after_run(self, bank_day):
        sim = Simulation(bank_day)
        summary = sim.run()

        assert sim.summary is summary
        assert summary.total_time == 480
        assert summary.total_servers == 2

    def test_steps_equal_window_length(self, bank_day):
        sim = Simulation(bank_day)
        sim.run()

        assert sim.steps == bank_day.duration

    def test_runs_only_once(self, bank_day):
        sim = Simulation(bank_day)
        sim.run()

        with pytest.raises(RuntimeError, match="already run"):
            sim.run()

    def test_failed_run_cannot_be_retried(self, bank_day):
        """A hook error leaves the streams advanced, so the object stays spent."""
        sim = Simulation(bank_day)

        def fail_on_third(customer):
            if customer.index == 3:
                raise KeyError(customer.index)

        with pytest.raises(KeyError):
            sim.run(on_customer=fail_on_third)

        with pytest.raises(RuntimeError, match="already run"):
            sim.run()
        assert sim.summary is None
        assert sim.steps < bank_day.duration

    def test_no_arrivals(self):
        """With a zero arrival rate the run still walks every minute."""
        config = SimulationConfig(
            start_time=0, end_time=240, servers=1, customer_rate=0.0, service_rate=6.0, seed=3
        )
        customers, sim = _run(config)

        assert customers == []
        assert sim.steps == 240
        assert sim.summary.total_customers == 0
        assert sim.summary.is_empty
        with pytest.raises(NoCustomersError):
            sim.summary.average_wait_time

    def test_summary_derivation_is_idempotent(self, bank_day):
        summary = simulate(bank_day)

        assert summary.average_wait_time == summary.average_wait_time
        assert summary.to_dict() == summary.to_dict()
        assert str(summary) == str(summary)
