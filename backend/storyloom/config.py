"""
Engine configuration - read from environment variables (and a .env file)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def _get_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def get_seed() -> int | None:
    """Get the random seed (unset means nondeterministic)"""
    return _get_int("STORYLOOM_SEED", None)


def get_wander_chance() -> float:
    """Get the per-tick probability that an NPC wanders"""
    return _get_float("STORYLOOM_NPC_WANDER_CHANCE", 0.5)


def get_ambient_narration() -> bool:
    """Whether ticks add a line of ambient narration"""
    return os.getenv("STORYLOOM_AMBIENT_NARRATION", "false").strip().lower() in _TRUE_VALUES


def get_evolution_chance() -> float:
    """Get the per-request probability of an offline world evolution"""
    return _get_float("STORYLOOM_EVOLUTION_CHANCE", 0.05)


def get_undo_depth() -> int:
    """Get the number of snapshots kept for undo"""
    return _get_int("STORYLOOM_UNDO_DEPTH", 20) or 0


def get_tick_every() -> int:
    """Get how many commands pass between automatic ticks (0 = manual only)"""
    return _get_int("STORYLOOM_TICK_EVERY", 0) or 0


def get_worlds_dir() -> Path | None:
    """Get an extra directory to load worlds from"""
    value = os.getenv("STORYLOOM_WORLDS_DIR")
    return Path(value) if value else None


def get_log_dir() -> Path:
    """Get the directory for log files"""
    return Path(os.getenv("STORYLOOM_LOG_DIR", "logs"))


class EngineSettings(BaseModel):
    """Tunable engine policies"""

    seed: int | None = None
    wander_chance: float = Field(default=0.5, ge=0.0, le=1.0)
    ambient_narration: bool = False
    evolution_chance: float = Field(default=0.05, ge=0.0, le=1.0)
    undo_depth: int = Field(default=20, ge=0)
    tick_every: int = Field(default=0, ge=0)
    worlds_dir: Path | None = None
    log_dir: Path = Path("logs")


def load_settings(**overrides: object) -> EngineSettings:
    """Build settings from the environment, then apply explicit overrides.

    Overrides set to None are ignored so CLI options can pass through
    unset values.
    """
    values: dict[str, object] = {
        "seed": get_seed(),
        "wander_chance": get_wander_chance(),
        "ambient_narration": get_ambient_narration(),
        "evolution_chance": get_evolution_chance(),
        "undo_depth": get_undo_depth(),
        "tick_every": get_tick_every(),
        "worlds_dir": get_worlds_dir(),
        "log_dir": get_log_dir(),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return EngineSettings.model_validate(values)
