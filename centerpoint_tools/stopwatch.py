"""Named stopwatches and timing-record output."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from enum import Enum

DEFAULT_NAME = "__auto__"


class TimeUnit(Enum):
    """Output unit of a stopwatch, as a number of microseconds."""

    SECONDS = 1_000_000
    MILLISECONDS = 1_000
    MICROSECONDS = 1


class StopWatch:
    """Measures elapsed time for any number of named timers.

    Durations are truncated to whole microseconds before being converted to
    the output unit.
    """

    def __init__(
        self,
        unit: TimeUnit = TimeUnit.SECONDS,
        clock: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        self.unit = unit
        self._clock = clock
        self._starts: dict[str, int] = {}
        self.tic()

    def tic(self, name: str = DEFAULT_NAME) -> None:
        """Start, or restart, the timer called ``name``."""
        self._starts[name] = self._clock()

    def toc(self, name: str = DEFAULT_NAME, reset: bool = False) -> float:
        """Return the time since ``name`` was started; raise KeyError if it never was."""
        start = self._starts[name]
        end = self._clock()
        elapsed_us = int((end - start) / 1000)
        if reset:
            self._starts[name] = self._clock()
        return elapsed_us / self.unit.value


def append_timing_record(path: str | os.PathLike[str], timestamp: float, value: float) -> None:
    """Append one ``timestamp value`` line to ``path``.

    Floats are written with ten decimal places; integers as they are.
    """
    rendered = str(value) if isinstance(value, int) else f"{value:.10f}"
    with open(path, "a", encoding="utf-8") as stream:
        stream.write(f"{timestamp:.10f} {rendered}\n")