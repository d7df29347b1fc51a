from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dblayout.config import LayoutSettings


def seed_databases_root(root: Path, *, databases: Iterable[str] = (), files: Iterable[str] = ()) -> Path:
    """Create `root` with one subdirectory per database and plain files alongside."""

    root.mkdir(parents=True, exist_ok=True)
    for name in databases:
        (root / name).mkdir()
    for name in files:
        (root / name).write_text("", encoding="utf-8")
    return root


def link_to(target: Path, link: Path) -> Path:
    """Create a directory symlink `link` pointing at `target`."""

    os.symlink(target, link, target_is_directory=True)
    return link


def custom_settings(base: Path, **overrides: object) -> LayoutSettings:
    """Settings with every root placed explicitly under `base`."""

    values: dict[str, object] = {
        "home": base / "home",
        "data_directory": base / "data",
        "databases_root": base / "stores",
        "transaction_logs_root": base / "txlogs",
        "script_root": base / "scripts",
    }
    values.update(overrides)
    return LayoutSettings(**values)
