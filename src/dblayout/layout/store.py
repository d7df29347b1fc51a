"""Resolution of the store-wide directory layout."""

from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from dblayout.config.models import DbLayoutConfig, LayoutSettings
from dblayout.util.paths import canonicalize

from .database import DatabaseLayout
from .discovery import list_databases, lookup_database

STORE_LOCK_FILENAME = "store_lock"
SERVER_ID_FILENAME = "server_id"

PathInput = Union[str, os.PathLike]


class LayoutIdentity(NamedTuple):
    """The roots that decide whether two layouts describe the same store."""

    home: Path
    data_root: Path
    databases_root: Path
    tx_logs_root: Path


class StoreLayout(BaseModel):
    """Immutable set of canonical roots for one store instance.

    Build instances with `resolve_from_home`, `resolve_from_config` or
    `resolve_flat`. Every root is canonicalised on construction.
    """

    model_config = ConfigDict(frozen=True)

    home: Path
    data_root: Path
    databases_root: Path
    tx_logs_root: Path
    script_root: Path

    @field_validator("home", "data_root", "databases_root", "tx_logs_root", "script_root")
    @classmethod
    def _canonical(cls, value: Path) -> Path:
        return canonicalize(value)

    @property
    def identity(self) -> LayoutIdentity:
        # script_root is informational and never part of identity
        return LayoutIdentity(self.home, self.data_root, self.databases_root, self.tx_logs_root)

    @property
    def store_lock_file(self) -> Path:
        return self.databases_root / STORE_LOCK_FILENAME

    @property
    def server_id_file(self) -> Path:
        return self.data_root / SERVER_ID_FILENAME

    def database_layout(self, name: str) -> DatabaseLayout:
        return lookup_database(self, name)

    def database_layouts(self) -> list[DatabaseLayout]:
        """Handles for the databases found under `databases_root`."""
        return list_databases(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StoreLayout):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __str__(self) -> str:
        return (
            f"StoreLayout{{home={self.home}, data={self.data_root}, "
            f"databases={self.databases_root}, txLogsRoot={self.tx_logs_root}}}"
        )


DatabaseLayout.model_rebuild()


def resolve_from_home(home: PathInput) -> StoreLayout:
    """Resolve a layout whose other roots all take their defaults under `home`."""
    return resolve_from_config(LayoutSettings(home=canonicalize(home)))


def resolve_from_config(config: LayoutSettings | DbLayoutConfig) -> StoreLayout:
    """Resolve a layout from the five configured roots, each canonicalised on its own."""

    settings = config.layout if isinstance(config, DbLayoutConfig) else config
    return StoreLayout(
        home=settings.home,
        data_root=settings.data_directory,
        databases_root=settings.databases_root,
        tx_logs_root=settings.transaction_logs_root,
        script_root=settings.script_root,
    )


def resolve_flat(home: PathInput) -> StoreLayout:
    """Resolve a layout where home, data, databases and transaction logs share one directory."""
    root = canonicalize(home)
    settings = LayoutSettings(
        home=root,
        data_directory=root,
        databases_root=root,
        transaction_logs_root=root,
    )
    return resolve_from_config(settings)


__all__ = [
    "LayoutIdentity",
    "SERVER_ID_FILENAME",
    "STORE_LOCK_FILENAME",
    "StoreLayout",
    "resolve_flat",
    "resolve_from_config",
    "resolve_from_home",
]
