# load search.yaml into NavSettings
# src/settings/loader.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Dataclasses for settings representation
# ---------------------------------------------------------------------------


@dataclass
class SearchConfig:
    max_climb: int = 1
    max_expansions: Optional[int] = None


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class NavSettings:
    """Top-level resolved settings."""
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_SETTINGS_PATH = CONFIG_ROOT / "search.yaml"

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping, failing loudly on missing files or bad shape."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' must be a mapping, got {type(value)}")
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_settings(path: Path | str | None = None) -> NavSettings:
    """
    Main entry point: returns validated NavSettings.

    An explicit path must exist. Without one, config/search.yaml is used
    when present (source checkout); an installed copy has no config/ dir
    and gets the built-in defaults.
    """
    if path is None:
        if not DEFAULT_SETTINGS_PATH.exists():
            log.info("No settings at %s, using defaults", DEFAULT_SETTINGS_PATH)
            return NavSettings()
        path = DEFAULT_SETTINGS_PATH

    raw = _load_yaml(Path(path))

    search_raw = _section(raw, "search")
    logging_raw = _section(raw, "logging")

    search = SearchConfig(
        max_climb=search_raw.get("max_climb", 1),
        max_expansions=search_raw.get("max_expansions"),
    )
    log_cfg = LoggingConfig(level=str(logging_raw.get("level", "INFO")).upper())

    _validate_settings(search, log_cfg)

    return NavSettings(search=search, logging=log_cfg)


def _validate_settings(search: SearchConfig, log_cfg: LoggingConfig) -> None:
    """Minimal sanity checks for the settings."""
    if not _is_int(search.max_climb) or search.max_climb < 0:
        raise ValueError(f"max_climb must be a non-negative int, got {search.max_climb!r}")

    if search.max_expansions is not None:
        if not _is_int(search.max_expansions) or search.max_expansions <= 0:
            raise ValueError(
                f"max_expansions must be a positive int or null, got {search.max_expansions!r}"
            )

    if log_cfg.level not in _LEVEL_NAMES:
        raise ValueError(f"Unknown logging level: {log_cfg.level}")
