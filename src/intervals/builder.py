"""Pure derivation of normalized interval totals from raw workout inputs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping

from .constants import (
    DEFAULT_MODE,
    MIN_ONE_FIELDS,
    MODE_AMRAP,
    MODE_EMOM,
    MODE_FOR_TIME,
    MODE_TABATA,
    MODES,
    SECONDS_PER_MINUTE,
)

WorkoutMode = Literal["tabata", "emom", "fortime", "amrap"]


@dataclass(frozen=True)
class Totals:
    """Durations (seconds) and repeat counts for one workout session."""
    prep: int = 0
    work: int = 1
    rest: int = 0
    rounds: int = 1
    cycles: int = 1
    longrest: int = 0


def compact_mode_tag(mode: str) -> str:
    """Lowercase ``mode`` and drop separators, so ``For-Time`` becomes ``fortime``."""
    return "".join(ch for ch in mode.lower() if ch not in "-_ ")


def normalize_mode(mode: Any) -> WorkoutMode:
    """Map loose mode spellings (``For-Time``, ``for_time``) onto a known tag."""
    if isinstance(mode, str):
        compact = compact_mode_tag(mode)
        if compact in MODES:
            return compact  # type: ignore[return-value]
    return DEFAULT_MODE  # type: ignore[return-value]


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _field(raw: Mapping[str, Any], name: str, *, source: str | None = None) -> int:
    floor = 1 if name in MIN_ONE_FIELDS else 0
    number = _to_number(raw.get(source or name))
    if not number:
        return floor
    return max(floor, int(number))


def _tabata(raw: Mapping[str, Any]) -> Totals:
    return Totals(
        prep=_field(raw, "prep"),
        work=_field(raw, "work"),
        rest=_field(raw, "rest"),
        rounds=_field(raw, "rounds"),
        cycles=_field(raw, "cycles"),
        longrest=_field(raw, "longrest"),
    )


def _emom(raw: Mapping[str, Any]) -> Totals:
    work = _field(raw, "work")
    source = "minutes" if _to_number(raw.get("minutes")) else "rounds"
    return Totals(
        prep=0,
        work=work,
        rest=max(0, SECONDS_PER_MINUTE - work),
        rounds=_field(raw, "rounds", source=source),
        cycles=1,
        longrest=0,
    )


def _single_interval(raw: Mapping[str, Any]) -> Totals:
    return Totals(prep=0, work=_field(raw, "work"), rest=0, rounds=1, cycles=1, longrest=0)


MODE_RULES: dict[str, Callable[[Mapping[str, Any]], Totals]] = {
    MODE_TABATA: _tabata,
    MODE_EMOM: _emom,
    MODE_FOR_TIME: _single_interval,
    MODE_AMRAP: _single_interval,
}


def build_totals(mode: Any, raw_inputs: Mapping[str, Any] | None = None) -> Totals:
    """Derive session totals for ``mode`` from raw user inputs.

    Never raises: missing or non-numeric values fall back to the field
    default (``0``, or ``1`` for work/rounds/cycles) and unknown modes are
    treated as ``tabata``.
    """
    rule = MODE_RULES[normalize_mode(mode)]
    return rule(raw_inputs or {})
