from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().with_name("scoring.yaml")

_DEFAULT_ATS_WEIGHTS: dict[str, float] = {
    "contact_info": 0.15,
    "experience": 0.25,
    "skills": 0.15,
    "education": 0.10,
    "keywords": 0.20,
    "metrics": 0.15,
}


def _scoring_config_path() -> Path:
    override = os.getenv("SCORING_CONFIG_PATH")
    return Path(override) if override else _DEFAULT_SCORING_CONFIG_PATH


def get_scoring_config() -> dict[str, Any]:
    """Load ATS scoring tunables from scoring.yaml and cache them.

    A missing file yields an empty mapping so every lookup falls back to the
    defaults passed by the caller.
    """
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    path = _scoring_config_path()
    if not path.exists():
        logger.warning("scoring_config_missing path=%s; using built-in defaults", path)
        _SCORING_CONFIG_CACHE = {}
        return _SCORING_CONFIG_CACHE

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def reset_scoring_config_cache() -> None:
    global _SCORING_CONFIG_CACHE
    _SCORING_CONFIG_CACHE = None


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'ats.weights.skills'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def get_ats_weights() -> dict[str, float]:
    """Category weights for the composite ATS score, falling back per key."""
    weights: dict[str, float] = {}
    for category, default in _DEFAULT_ATS_WEIGHTS.items():
        weights[category] = float(get_scoring_value(f"ats.weights.{category}", default))
    return weights


def get_ats_threshold(category: str, name: str, default: float) -> float:
    return float(get_scoring_value(f"ats.thresholds.{category}.{name}", default))
