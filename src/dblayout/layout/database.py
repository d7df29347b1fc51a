"""Per-database sub-layout derived from a store layout and a database name."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:  # pragma: no cover
    from .store import StoreLayout

DATABASE_LOCK_FILENAME = "database_lock"


class DatabaseLayout(BaseModel):
    """Handle pairing a `StoreLayout` with one database name.

    Obtain instances through `StoreLayout.database_layout` or
    `dblayout.layout.discovery`. The name is used verbatim.
    """

    model_config = ConfigDict(frozen=True)

    layout: StoreLayout
    name: str

    @property
    def database_directory(self) -> Path:
        return self.layout.databases_root / self.name

    @property
    def transaction_logs_directory(self) -> Path:
        return self.layout.tx_logs_root / self.name

    @property
    def database_lock_file(self) -> Path:
        return self.database_directory / DATABASE_LOCK_FILENAME

    def __str__(self) -> str:
        return f"DatabaseLayout{{name={self.name}, directory={self.database_directory}}}"


__all__ = ["DATABASE_LOCK_FILENAME", "DatabaseLayout"]
