"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from intervals import MODES, compact_mode_tag

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    RuntimeSettings,
    WorkoutSettings,
)

_DEFAULT_WORKOUT = WorkoutSettings()
_DEFAULT_RUNTIME = RuntimeSettings()


def parse_app_config(raw: Mapping[str, Any], *, source_file: str) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    workout = _parse_workout_settings(_section(raw, "workout"))
    runtime = _parse_runtime_settings(_section(raw, "runtime"))
    return AppConfig(workout=workout, runtime=runtime, source_file=source_file)


def _parse_workout_settings(section: Mapping[str, Any]) -> WorkoutSettings:
    return WorkoutSettings(
        mode=_as_mode(section.get("mode", _DEFAULT_WORKOUT.mode), "workout.mode"),
        prep=_as_int(section.get("prep", _DEFAULT_WORKOUT.prep), "workout.prep"),
        work=_as_int(section.get("work", _DEFAULT_WORKOUT.work), "workout.work"),
        rest=_as_int(section.get("rest", _DEFAULT_WORKOUT.rest), "workout.rest"),
        rounds=_as_int(
            section.get("rounds", _DEFAULT_WORKOUT.rounds),
            "workout.rounds",
        ),
        cycles=_as_int(
            section.get("cycles", _DEFAULT_WORKOUT.cycles),
            "workout.cycles",
        ),
        longrest=_as_int(
            section.get("longrest", _DEFAULT_WORKOUT.longrest),
            "workout.longrest",
        ),
        auto_next=_as_bool(
            section.get("auto_next", _DEFAULT_WORKOUT.auto_next),
            "workout.auto_next",
        ),
    )


def _parse_runtime_settings(section: Mapping[str, Any]) -> RuntimeSettings:
    tick_interval = _as_float(
        section.get("tick_interval_seconds", _DEFAULT_RUNTIME.tick_interval_seconds),
        "runtime.tick_interval_seconds",
    )
    if tick_interval <= 0:
        raise AppConfigurationError(
            "runtime.tick_interval_seconds must be greater than zero."
        )
    return RuntimeSettings(
        log_level=_as_log_level(
            section.get("log_level", _DEFAULT_RUNTIME.log_level),
            "runtime.log_level",
        ),
        session_cues=_as_bool(
            section.get("session_cues", _DEFAULT_RUNTIME.session_cues),
            "runtime.session_cues",
        ),
        tick_interval_seconds=tick_interval,
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_mode(value: Any, field: str) -> str:
    text = _as_str(value, field)
    compact = compact_mode_tag(text)
    if compact not in MODES:
        joined = ", ".join(MODES)
        raise AppConfigurationError(f"{field} must be one of: {joined}.")
    return compact


def _as_log_level(value: Any, field: str) -> str:
    text = _as_str(value, field).upper()
    if text not in logging.getLevelNamesMapping():
        raise AppConfigurationError(f"{field} must be a logging level name.")
    return text


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")
