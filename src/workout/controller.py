"""Interval workout state machine driven by an external once-per-second tick."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from intervals import Totals

from .clock import ClockLike
from .constants import (
    PHASE_DONE,
    PHASE_LONGREST,
    PHASE_PREPARE,
    PHASE_REST,
    PHASE_WORK,
    WARNING_PHASES,
    WARNING_REMAINING_SECONDS,
)

Phase = Literal["prepare", "work", "rest", "longrest", "done"]

StateCallback = Callable[["SessionState"], None]
DoneCallback = Callable[[], None]


@dataclass(frozen=True)
class SessionState:
    """Immutable session snapshot handed to observers."""
    phase: Phase
    remaining: int
    current_round: int
    current_cycle: int
    session_total_seconds: int
    session_elapsed_seconds: int
    totals: Totals
    running: bool
    warning_triggered: bool = False


def compute_session_total(totals: Totals) -> int:
    """Total session length in seconds.

    ``prep`` sits inside the per-cycle term, so it is charged once per cycle.
    """
    one_round = totals.work + totals.rest
    per_cycle = totals.prep + one_round * totals.rounds
    between_cycles = totals.longrest * (totals.cycles - 1) if totals.cycles > 1 else 0
    return per_cycle * totals.cycles + between_cycles


def _noop_state(_state: SessionState) -> None:
    return None


def _noop() -> None:
    return None


class TimerController:
    """Owns one session's progress and advances it once per external tick."""

    def __init__(
        self,
        totals: Totals,
        *,
        auto_next: bool = True,
        on_tick: Optional[StateCallback] = None,
        on_phase: Optional[StateCallback] = None,
        on_warning: Optional[StateCallback] = None,
        on_done: Optional[DoneCallback] = None,
        clock: Optional[ClockLike] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._auto_next = bool(auto_next)
        self._on_tick = on_tick or _noop_state
        self._on_phase = on_phase or _noop_state
        self._on_warning = on_warning or _noop_state
        self._on_done = on_done or _noop
        self._clock = clock
        self._logger = logger or logging.getLogger("workout")

        self._armed = False
        self._running = False
        self._warning_triggered = False

        self._totals = totals
        self._phase: Phase = PHASE_PREPARE
        self._remaining = totals.prep
        self._current_round = 1
        self._current_cycle = 1
        self._session_total_seconds = 0
        self._session_elapsed_seconds = 0
        self.reset(totals)

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def running(self) -> bool:
        return self._running

    @property
    def totals(self) -> Totals:
        return self._totals

    @property
    def auto_next(self) -> bool:
        return self._auto_next

    def get_state(self) -> SessionState:
        return SessionState(
            phase=self._phase,
            remaining=self._remaining,
            current_round=self._current_round,
            current_cycle=self._current_cycle,
            session_total_seconds=self._session_total_seconds,
            session_elapsed_seconds=self._session_elapsed_seconds,
            totals=self._totals,
            running=self._running,
            warning_triggered=self._warning_triggered,
        )

    def set_auto_next(self, value: bool) -> None:
        self._auto_next = bool(value)

    def reset(self, totals: Optional[Totals] = None) -> None:
        self.stop()
        if totals is not None:
            self._totals = totals
        self._current_round = 1
        self._current_cycle = 1
        self._phase = PHASE_PREPARE
        self._remaining = self._totals.prep
        self._session_total_seconds = compute_session_total(self._totals)
        self._session_elapsed_seconds = 0
        self._warning_triggered = False
        self._logger.info(
            "Workout reset: totals=%s session=%ss",
            self._totals,
            self._session_total_seconds,
        )
        state = self.get_state()
        self._on_phase(state)
        self._on_tick(state)

    def start(self) -> None:
        if self._running or self._phase == PHASE_DONE:
            return
        self._running = True
        if not self._armed:
            self._armed = True
            if self._clock is not None:
                self._clock.start(self.tick)
        self._logger.debug("Workout started: phase=%s remaining=%ss", self._phase, self._remaining)

    def pause(self) -> None:
        # Clock stays armed so resumed ticks keep their cadence.
        self._running = False
        self._logger.debug("Workout paused: phase=%s remaining=%ss", self._phase, self._remaining)

    def stop(self) -> None:
        self._running = False
        if not self._armed:
            return
        self._armed = False
        if self._clock is not None:
            self._clock.stop()
        self._logger.debug("Workout stopped: phase=%s", self._phase)

    def skip(self) -> None:
        if self._phase == PHASE_DONE:
            return
        self._advance()

    def tick(self) -> None:
        if not self._running:
            return

        self._remaining = max(0, self._remaining - 1)
        self._session_elapsed_seconds = min(
            self._session_total_seconds,
            self._session_elapsed_seconds + 1,
        )

        if (
            self._phase in WARNING_PHASES
            and self._remaining == WARNING_REMAINING_SECONDS
            and not self._warning_triggered
        ):
            self._warning_triggered = True
            self._on_warning(self.get_state())

        self._on_tick(self.get_state())

        if self._remaining <= 0 and self._phase != PHASE_DONE and self._auto_next:
            self._advance()

    def _advance(self) -> None:
        totals = self._totals
        if self._phase == PHASE_PREPARE:
            self._enter_work()
        elif self._phase == PHASE_WORK:
            if self._current_round < totals.rounds and totals.rest > 0:
                self._phase = PHASE_REST
                self._remaining = totals.rest
            else:
                self._complete_round()
        elif self._phase == PHASE_REST:
            self._complete_round()
        elif self._phase == PHASE_LONGREST:
            self._current_round = 1
            self._enter_work()

        self._warning_triggered = False
        self._logger.debug(
            "Phase changed: phase=%s round=%s cycle=%s remaining=%ss",
            self._phase,
            self._current_round,
            self._current_cycle,
            self._remaining,
        )
        state = self.get_state()
        self._on_phase(state)
        self._on_tick(state)
        if self._phase == PHASE_DONE:
            self._on_done()

    def _enter_work(self) -> None:
        self._phase = PHASE_WORK
        self._remaining = self._totals.work

    def _complete_round(self) -> None:
        if self._current_round < self._totals.rounds:
            self._current_round += 1
            self._enter_work()
        else:
            self._complete_cycle()

    def _complete_cycle(self) -> None:
        totals = self._totals
        if self._current_cycle < totals.cycles:
            self._current_cycle += 1
            if totals.longrest > 0:
                self._phase = PHASE_LONGREST
                self._remaining = totals.longrest
            else:
                self._current_round = 1
                self._enter_work()
            return

        self._phase = PHASE_DONE
        self._remaining = 0
        self.stop()
        self._logger.info(
            "Workout completed: elapsed=%ss total=%ss",
            self._session_elapsed_seconds,
            self._session_total_seconds,
        )
