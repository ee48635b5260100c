"""Phase constants used by the workout timer state machine."""

from __future__ import annotations

PHASE_PREPARE = "prepare"
PHASE_WORK = "work"
PHASE_REST = "rest"
PHASE_LONGREST = "longrest"
PHASE_DONE = "done"

# Phases that announce their end a few seconds early.
WARNING_PHASES: frozenset[str] = frozenset({PHASE_WORK, PHASE_REST})
WARNING_REMAINING_SECONDS = 3

DEFAULT_TICK_INTERVAL_SECONDS = 1.0
