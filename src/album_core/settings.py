from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Dict

import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV = "ALBUM_LAYOUT_SETTINGS"

DEFAULT_SETTINGS = {
    "row_tie_tolerance": 0.005,
    "column_tie_tolerance": 0.0001,
    "node_search_margin": 2.0,
    "column_cutoff_factor": 1.5,
    "masonry_epsilon": 1.0,
}


def settings_path() -> str:
    env_path = os.getenv(SETTINGS_ENV)
    if env_path:
        return os.path.abspath(os.path.expanduser(env_path))
    return os.path.join(os.path.dirname(__file__), "settings.yaml")


@lru_cache(maxsize=None)
def load_settings() -> Dict[str, float]:
    """Load engine tolerances from ``settings.yaml`` when available."""

    path = settings_path()
    data: Dict[str, object] = {}
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to read layout settings from %s", path)
            loaded = {}
        if isinstance(loaded, dict):
            data = loaded

    settings = DEFAULT_SETTINGS.copy()
    for key in DEFAULT_SETTINGS:
        if key in data:
            try:
                settings[key] = float(data[key])
            except (TypeError, ValueError):
                logger.warning("Ignoring non-numeric setting %s=%r", key, data[key])
                continue
    return settings


def setting(name: str) -> float:
    return load_settings()[name]
