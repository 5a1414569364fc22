"""Shared fixtures: a hand-cranked scheduler and a settable clock."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

import pytest


class ManualHandle:
    def __init__(self, scheduler: ManualScheduler, callback: Callable[[], None]) -> None:
        self.scheduler = scheduler
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose ticks fire only when the test calls fire()."""

    def __init__(self) -> None:
        self.handles: list[ManualHandle] = []
        self.intervals: list[float] = []

    def call_every(self, interval_s: float, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(self, callback)
        self.handles.append(handle)
        self.intervals.append(interval_s)
        return handle

    def fire(self, times: int = 1) -> None:
        """Fire every live task ``times`` times."""
        for _ in range(times):
            for handle in list(self.handles):
                if not handle.cancelled:
                    handle.callback()

    @property
    def active(self) -> list[ManualHandle]:
        return [h for h in self.handles if not h.cancelled]


class FakeClock:
    """Callable clock that only moves when advanced."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 3, 4, 9, 0, 0))
