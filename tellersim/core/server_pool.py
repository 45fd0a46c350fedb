"""Idle-time bookkeeping for a fixed pool of identical servers."""

from __future__ import annotations


class ServerPool:
    """Tracks the minute at which each server next becomes free.

    All servers start idle at minute 0. The pool never grows or shrinks, and
    occupy() is the only way its state changes.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self._idle_times = [0] * size

    def __len__(self) -> int:
        return len(self._idle_times)

    @property
    def idle_times(self) -> tuple[int, ...]:
        return tuple(self._idle_times)

    def select(self, arrival_time: int) -> tuple[int, int]:
        """Pick the earliest available server for a customer arriving now.

        A server's effective availability is max(idle time, arrival_time).
        The scan keeps the first minimum, so ties go to the lowest index, and
        stops at the first server that is free on arrival.

        Returns:
            (server index, minute service can begin)
        """
        best_index = -1
        best_time = 0
        for index, idle_time in enumerate(self._idle_times):
            available = idle_time if idle_time > arrival_time else arrival_time
            if best_index == -1 or available < best_time:
                best_index, best_time = index, available
                if available == arrival_time:
                    break
        return best_index, best_time

    def occupy(self, index: int, finish_time: int) -> None:
        """Mark a server busy until finish_time."""
        if finish_time < self._idle_times[index]:
            raise ValueError(
                f"server {index} is busy until {self._idle_times[index]}, "
                f"cannot finish at {finish_time}"
            )
        self._idle_times[index] = finish_time

    def __repr__(self) -> str:
        return f"ServerPool(idle_times={self._idle_times})"
