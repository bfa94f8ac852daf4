"""Layered .env loading.

Loads `.env`, `.env.local`, `.env.<env>` and `.env.<env>.local` into the
process environment without overriding variables that are already set.
"""

from __future__ import annotations

from .errors import (
    ConfigError,
    EnvFileReadError,
    EnvLayersError,
    EnvParseError,
    MalformedKeyError,
    UnterminatedQuoteError,
)
from .loader import active_env, layer_paths, load_env
from .parser import parse, read_file
from .settings import LoaderSettings, load_settings
from .store import MappingStore, OsEnvironStore, ProcessStore

__all__ = [
    "__version__",
    "ConfigError",
    "EnvFileReadError",
    "EnvLayersError",
    "EnvParseError",
    "LoaderSettings",
    "MalformedKeyError",
    "MappingStore",
    "OsEnvironStore",
    "ProcessStore",
    "UnterminatedQuoteError",
    "active_env",
    "layer_paths",
    "load_env",
    "load_settings",
    "parse",
    "read_file",
]

__version__ = "0.1.0"
