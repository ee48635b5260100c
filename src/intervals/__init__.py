from .builder import (
    MODE_RULES,
    Totals,
    WorkoutMode,
    build_totals,
    compact_mode_tag,
    normalize_mode,
)
from .constants import MODES

__all__ = [
    "MODES",
    "MODE_RULES",
    "Totals",
    "WorkoutMode",
    "build_totals",
    "compact_mode_tag",
    "normalize_mode",
]
