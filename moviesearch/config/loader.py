"""Configuration loading utilities."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from moviesearch.config.schema import Config

DEFAULT_BASE_URL = "https://www.omdbapi.com/"


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".moviesearch" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            data = _migrate_config(data)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: Any) -> dict:
    """Migrate old config formats to current."""
    if not isinstance(data, dict):
        raise ValueError(f"config root must be an object, got {type(data).__name__}")
    omdb_cfg = data.setdefault("omdb", {})
    if not isinstance(omdb_cfg, dict):
        raise ValueError(f"omdb section must be an object, got {type(omdb_cfg).__name__}")

    # Move legacy top-level apikey/apiKey -> omdb.apiKey
    for legacy_key in ("apikey", "apiKey"):
        legacy_value = data.pop(legacy_key, None)
        if legacy_value and not (omdb_cfg.get("apiKey") or omdb_cfg.get("api_key")):
            omdb_cfg["apiKey"] = legacy_value

    # Fill default base URL when missing/empty
    if not (omdb_cfg.get("baseUrl") or omdb_cfg.get("base_url")):
        omdb_cfg["baseUrl"] = DEFAULT_BASE_URL

    return data
