from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator

import pytest

from envlayers.store import MappingStore


@pytest.fixture
def store() -> MappingStore:
    return MappingStore()


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write `content` to tmp_path/name and return the path."""

    def _write(name: str, content: str) -> Path:
        p = tmp_path / name
        p.write_text(content, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def restore_environ() -> Iterator[os._Environ[str]]:
    saved = dict(os.environ)
    try:
        yield os.environ
    finally:
        os.environ.clear()
        os.environ.update(saved)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    # The CLI reconfigures the root logger; keep that out of other tests.
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
