"""Config loading entry points for dblayout."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import DbLayoutConfig

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[assignment]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "dblayout.default.yaml"
HOME_ENV_VAR = "DBLAYOUT_HOME"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> DbLayoutConfig:
    """Load the dblayout configuration applying optional overrides.

    Precedence, lowest first: packaged defaults, ``path``, the
    ``DBLAYOUT_HOME`` environment variable, then ``overrides`` (dotted keys
    such as ``layout.home`` are expanded).
    """

    default_data = _expect_mapping(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)

    if path:
        config_data = _expect_mapping(_read_structured_file(path), path)
    else:
        config_data = {}

    merged: dict[str, Any] = _deep_merge(default_data, config_data)

    env_home = os.getenv(HOME_ENV_VAR)
    if env_home:
        merged = _deep_merge(merged, {"layout": {"home": env_home}})

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    try:
        return DbLayoutConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest`` with every root spelled out.

    The five layout roots are written after the defaulting rules ran, so the
    example shows where each root lands relative to ``home``.
    """

    suffix = dest.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise ConfigError(f"Cannot export configuration as {suffix or dest.name!r}; use .yaml or .json.")

    defaults = DbLayoutConfig.model_validate(_read_structured_file(DEFAULT_CONFIG_PATH))
    payload = defaults.model_dump(mode="json", exclude_none=True)

    dest.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".json":
        text = json.dumps(payload, indent=2)
    else:
        text = yaml.safe_dump(payload, sort_keys=False)
    dest.write_text(text, encoding="utf-8")


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if isinstance(payload, Mapping):
        return dict(payload)
    if payload in (None, [], ""):
        return {}
    raise ConfigError(f"{source} must hold a mapping of sections, not {type(payload).__name__}.")


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".toml", ".json"}:
        raise ConfigError(f"Unsupported config format for {path}")

    try:
        text = path.read_text(encoding="utf-8")
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text)
        return yaml.safe_load(text) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = dict(base)
    for key, value in extra.items():
        current = result.get(key)
        both_sections = isinstance(current, Mapping) and isinstance(value, Mapping)
        result[key] = _deep_merge(current, value) if both_sections else value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``layout.home``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(key, str) and "." in key:
            *parents, leaf = key.split(".")
            nested: dict[str, Any] = {leaf: value}
            for segment in reversed(parents):
                nested = {segment: nested}
            result = _deep_merge(result, nested)
        else:
            result = _deep_merge(result, {key: value})
    return result


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "HOME_ENV_VAR",
    "dump_example_config",
    "load_config",
]
