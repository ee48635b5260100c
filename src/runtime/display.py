"""Text helpers that turn session snapshots into console-friendly strings."""

from __future__ import annotations

from intervals import Totals
from workout import SessionState, compute_session_total
from workout.constants import (
    PHASE_DONE,
    PHASE_LONGREST,
    PHASE_PREPARE,
    PHASE_REST,
    PHASE_WORK,
)

PHASE_LABELS: dict[str, str] = {
    PHASE_PREPARE: "Prepare",
    PHASE_WORK: "Work",
    PHASE_REST: "Rest",
    PHASE_LONGREST: "Long Rest",
    PHASE_DONE: "Done",
}


def format_time(seconds: int) -> str:
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"


def phase_label(phase: str) -> str:
    return PHASE_LABELS.get(phase, phase)


def interval_duration(state: SessionState) -> int:
    """Full length of the phase the snapshot is in."""
    totals = state.totals
    durations = {
        PHASE_PREPARE: totals.prep,
        PHASE_WORK: totals.work,
        PHASE_REST: totals.rest,
        PHASE_LONGREST: totals.longrest,
    }
    return durations.get(state.phase, 1)


def interval_progress_percent(state: SessionState) -> float:
    total = interval_duration(state)
    if not total:
        return 100.0
    return _clamp_percent((1 - state.remaining / total) * 100)


def session_progress_percent(state: SessionState) -> float:
    if not state.session_total_seconds:
        return 0.0
    return _clamp_percent(
        state.session_elapsed_seconds / state.session_total_seconds * 100
    )


def round_line(state: SessionState) -> str:
    cycle = f"Cycle {state.current_cycle} / {state.totals.cycles}"
    if state.phase in (PHASE_LONGREST, PHASE_DONE):
        return cycle
    return f"Round {state.current_round} / {state.totals.rounds} • {cycle}"


def plan_summary(totals: Totals) -> str:
    return (
        f"Total session time: {format_time(compute_session_total(totals))}"
        f" • Work: {totals.work}s"
        f" • Rest: {totals.rest}s"
        f" • Rounds: {totals.rounds}"
        f" • Cycles: {totals.cycles}"
    )


def _clamp_percent(value: float) -> float:
    return min(100.0, max(0.0, value))
