"""Console callbacks that render timer notifications as terminal lines."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Optional, TextIO

from workout import SessionState
from workout.constants import PHASE_DONE, PHASE_LONGREST, PHASE_REST, PHASE_WORK

from .display import (
    format_time,
    interval_progress_percent,
    phase_label,
    round_line,
    session_progress_percent,
)

PHASE_CUES: dict[str, str] = {
    PHASE_WORK: "bell",
    PHASE_REST: "countdown",
    PHASE_LONGREST: "beep",
    PHASE_DONE: "bell",
}


class ConsoleReporter:
    """Supplies the four controller callbacks and writes status to a stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        session_cues: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        self._stream = stream or sys.stdout
        self._session_cues = session_cues
        self._logger = logger or logging.getLogger("console")
        self.finished = threading.Event()

    def on_tick(self, state: SessionState) -> None:
        interval = interval_progress_percent(state)
        session = session_progress_percent(state)
        self._write(
            f"\r  {phase_label(state.phase):<9} {format_time(state.remaining)}"
            f"  {round_line(state)}  interval {interval:3.0f}%  session {session:3.0f}%"
        )

    def on_phase(self, state: SessionState) -> None:
        self._logger.info(
            "Phase %s: %s (%s)",
            phase_label(state.phase),
            round_line(state),
            format_time(state.remaining),
        )
        cue = PHASE_CUES.get(state.phase)
        if self._session_cues and cue:
            self._write(f"\n  🔔 {cue}: {phase_label(state.phase)}\n")

    def on_warning(self, state: SessionState) -> None:
        self._write(f"\n  ⏱  {state.remaining}s left in {phase_label(state.phase)}\n")

    def on_done(self) -> None:
        self._write("\n  ✅ Workout complete\n")
        self.finished.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.finished.wait(timeout)

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()
