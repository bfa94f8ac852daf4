"""Process variable store capability.

The loader never touches `os.environ` directly; it is handed a store so tests
and embedding applications can substitute their own mapping.
"""

from __future__ import annotations

import os
from typing import Iterable, MutableMapping, Protocol


class ProcessStore(Protocol):
    def names(self) -> Iterable[str]: ...

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...


class MappingStore:
    """Store backed by any mutable mapping (a plain dict by default)."""

    def __init__(self, data: MutableMapping[str, str] | None = None):
        self.data: MutableMapping[str, str] = {} if data is None else data

    def names(self) -> Iterable[str]:
        return list(self.data.keys())

    def get(self, name: str) -> str | None:
        return self.data.get(name)

    def set(self, name: str, value: str) -> None:
        self.data[name] = value


class OsEnvironStore(MappingStore):
    """The real process environment."""

    def __init__(self) -> None:
        super().__init__(os.environ)
