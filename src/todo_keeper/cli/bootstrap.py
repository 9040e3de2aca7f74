# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the mirror and the confirmer into one TaskStore,
- seeds the store from the mirror before any mutation can happen.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.confirmers import AutoConfirmer, ConsoleConfirmer
from ..core.ports import Confirmer
from ..core.state import AppState
from ..storage import build_mirror
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.mirror_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, confirmer: Confirmer | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the confirmer) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if confirmer is None:
        confirmer = AutoConfirmer(True) if settings.assume_yes else ConsoleConfirmer()

    mirror = build_mirror(settings.mirror_backend, settings.mirror_path)
    store = TaskStore(mirror, confirmer, key=settings.storage_key)
    store.initialize()

    logger.info(
        "State ready backend=%s path=%s key=%s todos=%d",
        settings.mirror_backend,
        settings.mirror_path,
        settings.storage_key,
        store.total_count,
    )
    return AppState(settings=settings, mirror=mirror, task_store=store)
