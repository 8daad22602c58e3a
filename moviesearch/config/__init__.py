"""Configuration module for moviesearch."""

from moviesearch.config.loader import get_config_path, load_config, save_config
from moviesearch.config.schema import Config, LoggingConfig, OmdbConfig

__all__ = ["Config", "LoggingConfig", "OmdbConfig", "get_config_path", "load_config", "save_config"]
