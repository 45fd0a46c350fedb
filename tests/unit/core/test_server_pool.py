"""Tests for ServerPool earliest-available selection."""

import pytest

from tellersim.core import ServerPool


def _pool_with(idle_times: list[int]) -> ServerPool:
    pool = ServerPool(len(idle_times))
    for index, idle in enumerate(idle_times):
        pool.occupy(index, idle)
    return pool


class TestServerPool:

    def test_starts_idle(self):
        pool = ServerPool(3)

        assert len(pool) == 3
        assert pool.idle_times == (0, 0, 0)

    def test_rejects_empty_pool(self):
        with pytest.raises(ValueError, match="size must be positive"):
            ServerPool(0)

    def test_all_free_picks_first(self):
        pool = ServerPool(3)

        assert pool.select(10) == (0, 10)

    def test_picks_earliest_available(self):
        pool = _pool_with([30, 10, 20])

        assert pool.select(5) == (1, 10)

    def test_ties_go_to_lowest_index(self):
        pool = _pool_with([20, 10, 10])

        assert pool.select(5) == (1, 10)

    def test_effective_availability_is_clamped_to_arrival(self):
        """Servers idle since before the arrival are all available at the arrival minute."""
        pool = _pool_with([30, 3, 2])

        assert pool.select(5) == (1, 5)

    def test_busy_pool_waits_for_first_release(self):
        pool = _pool_with([40, 35])

        index, available = pool.select(30)
        assert (index, available) == (1, 35)

    def test_occupy_updates_only_that_server(self):
        pool = ServerPool(2)
        pool.occupy(1, 17)

        assert pool.idle_times == (0, 17)

    def test_occupy_cannot_move_idle_time_back(self):
        pool = _pool_with([10])

        with pytest.raises(ValueError, match="busy until 10"):
            pool.occupy(0, 9)

    def test_idle_times_is_a_copy(self):
        pool = ServerPool(2)
        snapshot = pool.idle_times
        pool.occupy(0, 5)

        assert snapshot == (0, 0)
