# src/todo_keeper/storage/__init__.py

"""Durable mirror backends and a factory to pick one from settings."""

from __future__ import annotations

from pathlib import Path

from ..core.ports import DurableMirror
from .json_mirror import JsonFileMirror
from .sqlite_mirror import SqliteMirror

BACKENDS = ("memory", "json", "sqlite")


class MemoryMirror:
    """Dict-backed mirror. Nothing survives the process; used in tests and dry runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> str | None:
        return self.data.get(key)

    def save(self, key: str, value: str) -> None:
        self.data[key] = value

    def erase(self, key: str) -> None:
        self.data.pop(key, None)

    def close(self) -> None:
        return


def build_mirror(backend: str, path: str | Path | None = None) -> DurableMirror:
    name = (backend or "").strip().lower()
    if name == "memory":
        return MemoryMirror()
    if name == "json":
        return JsonFileMirror(path or "todos.json")
    if name == "sqlite":
        return SqliteMirror(path or "todos.sqlite3")
    raise ValueError(f"Unknown mirror backend {backend!r}; expected one of {', '.join(BACKENDS)}")


__all__ = ["BACKENDS", "JsonFileMirror", "MemoryMirror", "SqliteMirror", "build_mirror"]
