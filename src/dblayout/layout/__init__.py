"""Store layout resolution and database discovery."""

from .database import DATABASE_LOCK_FILENAME, DatabaseLayout
from .discovery import list_databases, lookup_database, sorted_databases
from .store import (
    SERVER_ID_FILENAME,
    STORE_LOCK_FILENAME,
    LayoutIdentity,
    StoreLayout,
    resolve_flat,
    resolve_from_config,
    resolve_from_home,
)

__all__ = [
    "DATABASE_LOCK_FILENAME",
    "DatabaseLayout",
    "LayoutIdentity",
    "SERVER_ID_FILENAME",
    "STORE_LOCK_FILENAME",
    "StoreLayout",
    "list_databases",
    "lookup_database",
    "resolve_flat",
    "resolve_from_config",
    "resolve_from_home",
    "sorted_databases",
]
