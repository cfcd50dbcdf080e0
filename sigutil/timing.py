"""Measuring elapsed time by wall clock or by a raw tick counter."""

from __future__ import annotations

import time
from collections.abc import Callable

_COUNTER_WRAP = 2**63 - 1


class Clockwatch:
    """Counts raw ticks between successive calls of :meth:`tick`.

    A counter that does not advance, or goes backwards, is taken to have
    wrapped around at 2**63 - 1.
    """

    def __init__(self, counter: Callable[[], int] | None = None) -> None:
        self._counter = counter if counter is not None else time.perf_counter_ns
        self._last = 0
        self._base = self._counter()

    def tick(self) -> int:
        """Return the ticks since the previous tick (or since creation)."""
        end = self._counter()
        if end <= self._base:
            self._last = _COUNTER_WRAP - self._base + end + 1
        else:
            self._last = end - self._base
        self._base = end
        return self._last

    def push(self) -> int:
        return self.tick()

    def last_record(self) -> int:
        return self._last


class Stopwatch:
    """Measures seconds between successive calls of :meth:`tick`.

    After :meth:`correlate`, ticks of a :class:`Clockwatch` are converted to
    seconds instead of reading the clock.
    """

    def __init__(
        self,
        clock: Callable[[], float] | None = None,
        clockwatch: Clockwatch | None = None,
    ) -> None:
        self._clock = clock if clock is not None else time.time
        self._clockwatch = clockwatch if clockwatch is not None else Clockwatch()
        self._last = 0.0
        self._factor = 0.0
        self._correlated = False
        self._base = self._clock()

    def tick(self) -> float:
        """Return the seconds since the previous tick (or since creation)."""
        if self._correlated:
            self._last = self._factor * self._clockwatch.tick()
        else:
            now = self._clock()
            self._last = now - self._base
            self._base = now
        return self._last

    def push(self) -> float:
        return self.tick()

    def correlate(self, period: float = 1.0) -> None:
        """Sleep ``period`` seconds to learn how many seconds one counter tick lasts."""
        self._clockwatch.tick()
        time.sleep(period)
        self._factor = period / self._clockwatch.tick()
        self._correlated = True

    def last_record(self) -> float:
        return self._last

    def is_correlated(self) -> bool:
        return self._correlated