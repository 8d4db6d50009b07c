"""Configuration helpers for the validation engine."""

from .settings import BUNDLED_RULES_DIR, DEFAULT_TEAM_CAP, EngineSettings

__all__ = [
    "BUNDLED_RULES_DIR",
    "DEFAULT_TEAM_CAP",
    "EngineSettings",
]
