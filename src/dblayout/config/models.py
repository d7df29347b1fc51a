"""Pydantic models describing dblayout configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_DATA_DIRNAME = "data"
DEFAULT_DATABASES_DIRNAME = "databases"
DEFAULT_TRANSACTIONS_DIRNAME = "transactions"
DEFAULT_SCRIPTS_DIRNAME = "scripts"


class LayoutSettings(BaseModel):
    """The five directory settings a store layout is resolved from.

    Unset roots default relative to their parent setting: the data directory
    lives under ``home`` and the remaining roots live under the data directory.
    Relative values are anchored the same way. ``home`` itself may stay relative;
    it is made absolute when the layout is resolved.
    """

    model_config = ConfigDict(extra="allow")

    home: Path = Path(".")
    data_directory: Optional[Path] = None
    databases_root: Optional[Path] = None
    transaction_logs_root: Optional[Path] = None
    script_root: Optional[Path] = None

    @model_validator(mode="after")
    def _apply_defaults(self) -> "LayoutSettings":
        """Fill unset roots and anchor relative ones."""

        data = _anchor(self.home, self.data_directory, DEFAULT_DATA_DIRNAME)
        self.data_directory = data
        self.databases_root = _anchor(data, self.databases_root, DEFAULT_DATABASES_DIRNAME)
        self.transaction_logs_root = _anchor(
            data, self.transaction_logs_root, DEFAULT_TRANSACTIONS_DIRNAME
        )
        self.script_root = _anchor(data, self.script_root, DEFAULT_SCRIPTS_DIRNAME)
        return self


class LoggingSettings(BaseModel):
    """Log level and optional log file for the command-line tooling."""

    model_config = ConfigDict(extra="allow")

    level: str = "INFO"
    log_path: Optional[Path] = None


class DbLayoutConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def _anchor(parent: Path, value: Optional[Path], default_name: str) -> Path:
    if value is None:
        return parent / default_name
    value = value.expanduser()
    if value.is_absolute():
        return value
    return parent / value


__all__ = [
    "DbLayoutConfig",
    "LayoutSettings",
    "LoggingSettings",
]
