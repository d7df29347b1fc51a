"""Discovery of the databases that already exist under a store layout."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dblayout.util.paths import FilesystemResolutionError

from .database import DatabaseLayout

if TYPE_CHECKING:  # pragma: no cover
    from .store import StoreLayout


def lookup_database(layout: "StoreLayout", name: str) -> DatabaseLayout:
    """Return the handle for `name` without touching the filesystem."""
    return DatabaseLayout(layout=layout, name=name)


def list_databases(layout: "StoreLayout") -> list[DatabaseLayout]:
    """Return a handle for every subdirectory of the databases root.

    Entries come back in directory-listing order; non-directories are skipped.
    A databases root that does not exist yet yields an empty list, any other
    read failure raises `FilesystemResolutionError`.
    """

    root = layout.databases_root
    try:
        with os.scandir(root) as entries:
            return [lookup_database(layout, entry.name) for entry in entries if entry.is_dir()]
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise FilesystemResolutionError(root, "Cannot list databases directory") from exc


def sorted_databases(layout: "StoreLayout") -> list[DatabaseLayout]:
    """Return `list_databases` ordered by database name."""
    return sorted(list_databases(layout), key=lambda database: database.name)


__all__ = ["list_databases", "lookup_database", "sorted_databases"]
