# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.core.state import AppState
from todo_keeper.tasks.task_store import TaskStore

from .fakes import FrozenClock, RecordingMirror, ScriptedConfirmer


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        mirror_backend="json",
        mirror_path=tmp_path / "todos.json",
        storage_key="todos",
        console_enabled=False,
        assume_yes=True,
    )


@pytest.fixture()
def mirror() -> RecordingMirror:
    return RecordingMirror()


@pytest.fixture()
def confirmer() -> ScriptedConfirmer:
    return ScriptedConfirmer(answer=True)


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def store(mirror: RecordingMirror, confirmer: ScriptedConfirmer, clock: FrozenClock) -> TaskStore:
    s = TaskStore(mirror, confirmer, clock=clock)
    s.initialize()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, mirror: RecordingMirror, store: TaskStore) -> AppState:
    """AppState wired with an in-memory mirror and a scripted confirmer."""
    return AppState(settings=settings, mirror=mirror, task_store=store)
