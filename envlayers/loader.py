"""Layered env-file loading.

Layers, lowest precedence first:

    <base>, <base>.local, <base>.<env>, <base>.<env>.local

Variables present in the store before the load began always win over every
layer. Among layers, a later one overwrites what an earlier one wrote during
the same call.
"""

from __future__ import annotations

import os
from typing import Iterator

from .observability import get_logger
from .parser import read_file
from .settings import LoaderSettings
from .store import OsEnvironStore, ProcessStore

log = get_logger("envlayers.loader")


def active_env(store: ProcessStore, settings: LoaderSettings | None = None) -> str:
    """Return the active environment name, writing the default back when unset or empty."""

    settings = settings or LoaderSettings()
    env = store.get(settings.env_key)
    if not env:
        env = settings.default_env
        store.set(settings.env_key, env)
    return env


def layer_paths(base: str | os.PathLike[str], env: str, *, local_suffix: str = ".local") -> list[str]:
    p = os.fspath(base)
    return [
        p,
        f"{p}{local_suffix}",
        f"{p}.{env}",
        f"{p}.{env}{local_suffix}",
    ]


def _iter_layers(base: str, store: ProcessStore, settings: LoaderSettings) -> Iterator[str]:
    # The environment name is resolved only after the first two layers are
    # merged, so `.env` itself may set it.
    yield base
    yield f"{base}{settings.local_suffix}"
    env = active_env(store, settings)
    yield from layer_paths(base, env, local_suffix=settings.local_suffix)[2:]


def load_env(
    *paths: str | os.PathLike[str],
    store: ProcessStore | None = None,
    settings: LoaderSettings | None = None,
) -> dict[str, str]:
    """Load the env-file layers for one base path into `store`.

    Args:
        paths: Zero or one base path. Anything else falls back to
            `settings.default_path` (a warning is logged).
        store: Target variable store; defaults to the process environment.
        settings: Loader settings; defaults to LoaderSettings().

    Returns:
        The file-sourced variables this call wrote, with their final values.
        A defaulted environment name is written to the store but not listed.
        Variables the store refuses (empty name, NUL byte) are skipped and
        logged as `env_key_rejected`.

    Raises:
        EnvFileReadError: an existing layer could not be read.
        EnvParseError: a layer is malformed. Layers merged before it stay
            applied.
    """

    settings = settings or LoaderSettings()
    store = store if store is not None else OsEnvironStore()

    if len(paths) == 1:
        base = os.fspath(paths[0])
    else:
        if paths:
            log.warning("env_paths_collapsed", given=[os.fspath(p) for p in paths], used=settings.default_path)
        base = settings.default_path

    preexisting = set(store.names())
    applied: dict[str, str] = {}

    for path in _iter_layers(base, store, settings):
        values = read_file(path)
        if not values:
            log.debug("env_layer_missing_or_empty", path=path)
            continue

        written = 0
        for key, value in values.items():
            if key in preexisting:
                log.debug("env_key_preserved", path=path, key=key)
                continue
            try:
                store.set(key, value)
            except (OSError, ValueError) as e:
                # e.g. an empty name or a NUL byte, which putenv refuses
                log.warning("env_key_rejected", path=path, key=key, reason=str(e))
                continue
            applied[key] = value
            written += 1

        log.debug("env_layer_loaded", path=path, keys=len(values), applied=written)

    log.debug("env_load_done", base=base, applied=len(applied))
    return applied
