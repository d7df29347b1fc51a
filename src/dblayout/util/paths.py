"""Path canonicalisation shared by every layout root."""

from __future__ import annotations

import os
from pathlib import Path


class FilesystemResolutionError(RuntimeError):
    """Raised when a path cannot be canonicalised or a directory cannot be read."""

    def __init__(self, path: str | os.PathLike[str], message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


def canonicalize(path: str | os.PathLike[str]) -> Path:
    """Return the absolute, symlink-resolved form of `path`.

    Missing trailing components are normalised lexically once the existing
    prefix has been resolved, so layouts can be computed before first startup.
    """
    if path is None:
        raise TypeError("path must not be None")
    candidate = Path(path).expanduser()
    try:
        return candidate.resolve()
    except (OSError, RuntimeError) as exc:  # RuntimeError: symlink loop before 3.13
        raise FilesystemResolutionError(candidate, "Cannot canonicalize path") from exc


__all__ = ["FilesystemResolutionError", "canonicalize"]
