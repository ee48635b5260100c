"""Mode tags and input defaults used by interval plan derivation."""

from __future__ import annotations

MODE_TABATA = "tabata"
MODE_EMOM = "emom"
MODE_FOR_TIME = "fortime"
MODE_AMRAP = "amrap"

MODES: tuple[str, ...] = (MODE_TABATA, MODE_EMOM, MODE_FOR_TIME, MODE_AMRAP)
DEFAULT_MODE = MODE_TABATA

SECONDS_PER_MINUTE = 60

# Fields whose floor is 1 instead of 0.
MIN_ONE_FIELDS: frozenset[str] = frozenset({"work", "rounds", "cycles"})
