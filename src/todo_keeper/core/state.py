# src/todo_keeper/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..tasks.task_store import TaskStore
from .ports import DurableMirror


@dataclass
class AppState:
    # Settings live on the state so connectors/commands can read them.
    settings: object

    mirror: DurableMirror
    task_store: TaskStore

    # Serializes command handling when several connectors share one store.
    lock: threading.RLock = field(default_factory=threading.RLock)
