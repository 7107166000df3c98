"""Start/stop wall-clock timing.

Each state is its own type: ``Stopwatch`` (idle) starts a
``RunningStopwatch``, whose ``stop`` returns a ``StoppedStopwatch`` holding
the duration. A duration can only be read from the stopped state.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

Clock = Callable[[], float]


@dataclass(frozen=True)
class StoppedStopwatch:
    started_at: float
    stopped_at: float

    @property
    def elapsed(self) -> float:
        return self.stopped_at - self.started_at

    @property
    def seconds(self) -> int:
        """Whole-second offset between the truncated start and stop timestamps."""
        return int(self.stopped_at) - int(self.started_at)


@dataclass(frozen=True)
class RunningStopwatch:
    started_at: float
    clock: Clock = time.time

    def stop(self) -> StoppedStopwatch:
        return StoppedStopwatch(started_at=self.started_at, stopped_at=self.clock())


class Stopwatch:
    def __init__(self, clock: Clock = time.time) -> None:
        self.clock = clock

    def start(self) -> RunningStopwatch:
        return RunningStopwatch(started_at=self.clock(), clock=self.clock)


__all__ = ["Clock", "Stopwatch", "RunningStopwatch", "StoppedStopwatch"]
