"""
envv/store.py
Environment store abstraction: the key/value table loaders write to and
accessors read from.

Usage:
    from envv.store import MemoryEnvStore
    store = MemoryEnvStore({"PORT": "8080"})
    declare("PORT", store=store).as_int().required().resolve()
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class EnvStore(Protocol):
    """Minimal get/set interface. ``get`` returns "" for absent keys."""

    def get(self, name: str) -> str: ...

    def set(self, name: str, value: str) -> None: ...


def _check_assignment(name: str, value: str) -> None:
    """Raise ValueError for names/values the process environment refuses."""
    if not name or "=" in name or "\x00" in name:
        raise ValueError(f"illegal environment variable name: {name!r}")
    if "\x00" in value:
        raise ValueError("embedded null byte")


class OsEnvStore:
    """Process environment (``os.environ``). Visible to child processes."""

    def get(self, name: str) -> str:
        return os.environ.get(name, "")

    def set(self, name: str, value: str) -> None:
        # os.environ raises OSError for some illegal names; check first
        _check_assignment(name, value)
        os.environ[name] = value

    def __repr__(self) -> str:
        return "OsEnvStore()"


class MemoryEnvStore:
    """Private dict-backed store, isolated from the process environment."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, name: str) -> str:
        return self._data.get(name, "")

    def set(self, name: str, value: str) -> None:
        _check_assignment(name, value)
        self._data[name] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MemoryEnvStore({len(self._data)} vars)"


# Singleton instance
_os_store = OsEnvStore()


def default_store() -> OsEnvStore:
    """Shared store backed by the process environment."""
    return _os_store


def resolve_store(store: Optional[EnvStore]) -> EnvStore:
    return store if store is not None else _os_store
