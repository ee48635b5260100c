"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class WorkoutSettings:
    """Workout mode and raw interval inputs loaded from `[workout]`."""
    mode: str = "tabata"
    prep: int = 10
    work: int = 20
    rest: int = 10
    rounds: int = 8
    cycles: int = 1
    longrest: int = 60
    auto_next: bool = True

    def raw_inputs(self) -> dict[str, Any]:
        return {
            "prep": self.prep,
            "work": self.work,
            "rest": self.rest,
            "rounds": self.rounds,
            "cycles": self.cycles,
            "longrest": self.longrest,
        }


@dataclass(frozen=True)
class RuntimeSettings:
    """Console runtime options loaded from `[runtime]`."""
    log_level: str = "INFO"
    session_cues: bool = True
    tick_interval_seconds: float = 1.0


@dataclass(frozen=True)
class AppConfig:
    workout: WorkoutSettings
    runtime: RuntimeSettings
    source_file: str
