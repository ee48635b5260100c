"""Periodic once-per-second trigger that drives the timer controller."""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Callable, Optional, Protocol

from .constants import DEFAULT_TICK_INTERVAL_SECONDS


class ClockLike(Protocol):
    def start(self, callback: Callable[[], None]) -> None:
        ...

    def stop(self) -> None:
        ...


class SecondClock:
    """Daemon-thread ticker scheduled on monotonic deadlines."""

    def __init__(
        self,
        interval_seconds: float = DEFAULT_TICK_INTERVAL_SECONDS,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")

        self._interval_seconds = float(interval_seconds)
        self._logger = logger or logging.getLogger("workout.clock")
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, callback: Callable[[], None]) -> None:
        if self.is_running:
            self._logger.warning("Clock is already running")
            return

        # Fresh event per run so a lingering thread only sees its own stop.
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(callback, self._stop_event),
            daemon=True,
            name="second-clock",
        )
        self._thread.start()

    def stop(self, timeout_seconds: float = 2.0) -> None:
        thread = self._thread
        if thread is None:
            return

        self._stop_event.set()
        self._thread = None

        # A tick that finishes the session stops the clock from its own thread.
        if thread is threading.current_thread():
            return

        thread.join(timeout=timeout_seconds)
        if thread.is_alive():
            self._logger.error(
                "Clock thread did not stop within %.1fs",
                timeout_seconds,
            )

    def _run(self, callback: Callable[[], None], stop_event: threading.Event) -> None:
        interval = self._interval_seconds
        next_deadline = time.monotonic() + interval
        while not stop_event.wait(max(0.0, next_deadline - time.monotonic())):
            try:
                callback()
            except Exception:
                self._logger.exception("Clock callback failed")

            next_deadline += interval
            behind = time.monotonic() - next_deadline
            if behind >= interval:
                # Drop whole missed intervals instead of bursting ticks.
                next_deadline += math.floor(behind / interval) * interval
