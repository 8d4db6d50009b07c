"""Engine settings resolved from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

_TEAM_CAP_ENV = "GARAGE_TEAM_CAP"
_CATALOG_DIR_ENV = "GARAGE_CATALOG_DIR"

DEFAULT_TEAM_CAP = 50
BUNDLED_RULES_DIR = Path(__file__).resolve().parents[1] / "data" / "rules"


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning("%s must be >= %d, got %d; using default %d", name, min_value, value, default)
        return default
    return value


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if not raw:
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class EngineSettings:
    team_cap: int = DEFAULT_TEAM_CAP
    catalog_dir: Path = BUNDLED_RULES_DIR

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            team_cap=_env_int(_TEAM_CAP_ENV, DEFAULT_TEAM_CAP, min_value=0),
            catalog_dir=_env_path(_CATALOG_DIR_ENV, BUNDLED_RULES_DIR),
        )
