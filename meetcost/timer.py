"""Live meeting timer.

MeetingTimer owns a MeetingSession and, while running, recomputes the meeting
cost against the current instant once per tick.  Ticks come from a Scheduler:
anything that can call a function repeatedly and hand back a cancellable
handle.  ThreadScheduler is the default and runs each repeating task on its
own daemon thread.

Start/stop and ticks are serialised under one lock, and every tick carries the
generation of the run that scheduled it, so a tick that fires after stop() or
close() is dropped instead of overwriting the frozen result.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Optional, Protocol

from meetcost.config import DEFAULT_ANNUAL_SALARY, DEFAULT_PARTICIPANTS, TICK_INTERVAL_S
from meetcost.models import CostResult, MeetingSession, SessionState
from meetcost.pricing import calculate_real_time_cost, convert_annual_to_hourly

logger = logging.getLogger(__name__)

Listener = Callable[[CostResult], None]


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_every(self, interval_s: float, callback: Callable[[], None]) -> Handle: ...


class _RepeatingTask:
    """Calls ``callback`` every ``interval_s`` seconds until cancelled.

    The interval is measured from the end of one call to the start of the
    next, so it drifts under load.
    """

    def __init__(self, interval_s: float, callback: Callable[[], None]) -> None:
        self._interval_s = interval_s
        self._callback = callback
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._run, name="meetcost-tick", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        while not self._cancelled.wait(self._interval_s):
            self._callback()

    def cancel(self) -> None:
        self._cancelled.set()
        # A callback may cancel its own task; joining would deadlock.
        if self._thread is not threading.current_thread() and self._thread.is_alive():
            self._thread.join(timeout=self._interval_s + 1)


class ThreadScheduler:
    """Scheduler backed by one daemon thread per repeating task."""

    def call_every(self, interval_s: float, callback: Callable[[], None]) -> Handle:
        task = _RepeatingTask(interval_s, callback)
        task.start()
        return task


class MeetingTimer:
    """Tracks a running meeting and keeps its cost current.

    ``participants`` and ``annual_salary`` may be changed at any time; the
    next tick uses the new values.  The duration always counts from the
    original start of the run.

    Args:
        participants: Number of attendees.
        annual_salary: Average annual salary per attendee.
        scheduler: Source of periodic ticks.  Defaults to ThreadScheduler.
        clock: Zero-argument callable returning the current datetime.
        interval_s: Seconds between recomputations.
    """

    def __init__(
        self,
        participants: int = DEFAULT_PARTICIPANTS,
        annual_salary: float = DEFAULT_ANNUAL_SALARY,
        scheduler: Optional[Scheduler] = None,
        clock: Optional[Callable[[], datetime]] = None,
        interval_s: float = TICK_INTERVAL_S,
    ) -> None:
        self.participants = participants
        self.annual_salary = annual_salary
        self._scheduler = scheduler or ThreadScheduler()
        self._clock = clock or datetime.now
        self._interval_s = interval_s

        self._lock = threading.RLock()
        self._session = MeetingSession()
        self._result = CostResult.zero()
        self._handle: Optional[Handle] = None
        self._generation = 0
        self._listeners: list[Listener] = []
        self._closed = False
        self.recompute_count = 0

    # -- state --------------------------------------------------------------

    @property
    def session(self) -> MeetingSession:
        with self._lock:
            return MeetingSession(self._session.start_time, self._session.is_running)

    @property
    def result(self) -> CostResult:
        return self._result

    @property
    def is_running(self) -> bool:
        return self._session.is_running

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def hourly_rate(self) -> float:
        return convert_annual_to_hourly(self.annual_salary)

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with every freshly computed CostResult.

        A listener that raises is logged and skipped; the run keeps ticking.
        """
        self._listeners.append(listener)

    # -- transitions --------------------------------------------------------

    def start(self) -> bool:
        """Begin a new run from now.  Returns False if already running."""
        with self._lock:
            return self._start_locked()

    def stop(self) -> bool:
        """End the current run, freezing the last result.  Returns False if idle."""
        with self._lock:
            if not self._session.is_running:
                logger.warning("Meeting is not running")
                return False
            handle = self._stop_locked()

        # Cancel outside the lock so a tick blocked on it can finish.
        if handle is not None:
            handle.cancel()
        return True

    def toggle(self) -> bool:
        """Start when idle, stop when running.  Returns the new running flag."""
        handle = None
        with self._lock:
            if self._session.is_running:
                handle = self._stop_locked()
            else:
                self._start_locked()
            running = self._session.is_running

        if handle is not None:
            handle.cancel()
        return running

    def _start_locked(self) -> bool:
        if self._closed:
            logger.warning("Cannot start: timer is closed")
            return False
        if self._session.is_running:
            logger.warning("Meeting already running since %s", self._session.start_time)
            return False

        self._session = MeetingSession(start_time=self._clock(), is_running=True)
        self._generation += 1
        generation = self._generation
        logger.info("Meeting started")

        # Ticks queue on the lock, so scheduling first cannot double-count.
        self._handle = self._scheduler.call_every(
            self._interval_s, lambda: self._tick(generation)
        )
        self._recompute()
        return True

    def _stop_locked(self) -> Optional[Handle]:
        self._session = MeetingSession(start_time=self._session.start_time, is_running=False)
        self._generation += 1
        handle, self._handle = self._handle, None
        logger.info("Meeting stopped after %.4f hours", self._result.duration_hours)
        return handle

    def close(self) -> None:
        """Tear down: stop any run and refuse further starts."""
        with self._lock:
            running = self._session.is_running
            self._closed = True
        if running:
            self.stop()

    def __enter__(self) -> MeetingTimer:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # -- recomputation ------------------------------------------------------

    def _tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or not self._session.is_running:
                logger.debug("Dropping stale tick from run %d", generation)
                return
            self._recompute()

    def _recompute(self) -> None:
        result = calculate_real_time_cost(
            self._session.start_time,
            self.participants,
            self.annual_salary,
            now=self._clock(),
        )
        self._result = result
        self.recompute_count += 1
        logger.debug("Recomputed: %s", result)
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception:
                logger.exception("Cost listener %r failed", listener)
