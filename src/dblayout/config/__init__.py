"""Configuration models and loaders for dblayout."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, HOME_ENV_VAR, dump_example_config, load_config
from .models import DbLayoutConfig, LayoutSettings, LoggingSettings

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DbLayoutConfig",
    "HOME_ENV_VAR",
    "LayoutSettings",
    "LoggingSettings",
    "dump_example_config",
    "load_config",
]
