"""Loader settings (YAML-first).

Settings are optional; without a file the defaults below apply. A settings
file is a YAML mapping, either flat or nested under a top-level `envlayers:`
key:

    envlayers:
      env_key: APP_ENV
      default_env: dev
      default_path: .env
      local_suffix: .local
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

__all__ = ["ConfigError", "LoaderSettings", "load_settings"]


@dataclass(frozen=True, slots=True)
class LoaderSettings:
    env_key: str = "APP_ENV"
    default_env: str = "dev"
    default_path: str = ".env"
    local_suffix: str = ".local"


def _settings_from_mapping(raw: dict[str, Any], *, source: str, prefix: str) -> LoaderSettings:
    allowed = {f.name for f in fields(LoaderSettings)}
    unknown = set(raw) - allowed
    if unknown:
        where = f"{source}:{prefix.rstrip('.')}" if prefix else source
        raise ConfigError(f"unknown keys: {sorted(map(str, unknown))}", path=where)

    values: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(value, str) or not value.strip():
            raise ConfigError("must be a non-empty string", path=f"{source}:{prefix}{key}")
        values[key] = value

    return LoaderSettings(**values)


def load_settings(path: str | Path | None = None) -> LoaderSettings:
    """Load LoaderSettings from a YAML file, or return defaults when `path` is None.

    Raises:
        ConfigError: if the file is missing, unreadable, not YAML, or has
            unknown/invalid keys.
    """

    if path is None:
        return LoaderSettings()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError("settings file does not exist", path=str(config_path))

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except Exception as e:  # noqa: BLE001
        raise ConfigError(f"failed to parse YAML: {e}", path=str(config_path)) from e

    if not isinstance(raw, dict):
        raise ConfigError("top level must be a YAML mapping", path=str(config_path))

    nested = list(raw) == ["envlayers"]
    section = raw["envlayers"] if nested else raw
    if section is None:
        return LoaderSettings()
    if not isinstance(section, dict):
        raise ConfigError("must be a mapping", path=f"{config_path}:envlayers")

    return _settings_from_mapping(section, source=str(config_path), prefix="envlayers." if nested else "")
