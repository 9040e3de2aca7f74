# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps storage backends and prompts swappable and makes testing easier.
"""

from typing import Protocol


class DurableMirror(Protocol):
    """
    Key-value persistence that survives process restarts.

    Values are opaque strings to the mirror. Implementations must treat
    erase() of a missing key as a no-op.
    """

    def load(self, key: str) -> str | None: ...
    def save(self, key: str, value: str) -> None: ...
    def erase(self, key: str) -> None: ...
    def close(self) -> None: ...


class Confirmer(Protocol):
    """Synchronous yes/no prompt gating destructive bulk operations."""

    def confirm(self, message: str) -> bool: ...
