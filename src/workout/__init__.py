from .clock import ClockLike, SecondClock
from .controller import (
    Phase,
    SessionState,
    TimerController,
    compute_session_total,
)

__all__ = [
    "ClockLike",
    "Phase",
    "SecondClock",
    "SessionState",
    "TimerController",
    "compute_session_total",
]
