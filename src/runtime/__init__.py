"""Console runtime exports."""

from .console import PHASE_CUES, ConsoleReporter
from .display import (
    PHASE_LABELS,
    format_time,
    interval_duration,
    interval_progress_percent,
    phase_label,
    plan_summary,
    round_line,
    session_progress_percent,
)

__all__ = [
    "ConsoleReporter",
    "PHASE_CUES",
    "PHASE_LABELS",
    "format_time",
    "interval_duration",
    "interval_progress_percent",
    "phase_label",
    "plan_summary",
    "round_line",
    "session_progress_percent",
]
