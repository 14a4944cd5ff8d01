from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSettings:
    cell_count: int = 10
    number_min: int = 1
    number_max: int = 11
    round_seconds: int = 180
    band_min: int = 3
    band_max: int = 50
    top_candidates: int = 10
    default_target: int = 10
    feedback_ms: int = 1500
    storage_key: str = "equationPyramidTeams"


def default_settings_path() -> Path:
    override = os.environ.get("EQPYRAMID_SETTINGS")
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


def load_settings(path: Optional[Path] = None) -> GameSettings:
    """Load game settings from YAML, falling back to defaults for missing keys."""
    settings_path = Path(path) if path is not None else default_settings_path()
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected a YAML mapping of settings")
    return settings_from_mapping(raw, source=settings_path.name)


def settings_from_mapping(raw: Dict[str, Any], source: str = "settings") -> GameSettings:
    known = {f.name: f for f in fields(GameSettings)}
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            logger.warning("%s: ignoring unknown setting %r", source, key)
            continue
        if key == "storage_key":
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{source}: 'storage_key' must be a non-empty string")
            values[key] = value.strip()
            continue
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{source}: {key!r} must be an integer, got {value!r}")
        values[key] = value

    settings = GameSettings(**values)
    _validate(settings, source)
    return settings


def _validate(settings: GameSettings, source: str) -> None:
    if settings.cell_count < 3:
        raise ValueError(f"{source}: 'cell_count' must be at least 3")
    if settings.number_min > settings.number_max:
        raise ValueError(f"{source}: 'number_min' is greater than 'number_max'")
    if settings.round_seconds <= 0:
        raise ValueError(f"{source}: 'round_seconds' must be positive")
    if settings.band_min > settings.band_max:
        raise ValueError(f"{source}: 'band_min' is greater than 'band_max'")
    if settings.top_candidates <= 0:
        raise ValueError(f"{source}: 'top_candidates' must be positive")
    if settings.default_target <= 0:
        raise ValueError(f"{source}: 'default_target' must be a positive integer")
    if settings.feedback_ms < 0:
        raise ValueError(f"{source}: 'feedback_ms' cannot be negative")
