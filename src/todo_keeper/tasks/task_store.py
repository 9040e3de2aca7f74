# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from ..core.ports import Confirmer, DurableMirror
from .task_models import Task, TaskFormatError, decode_tasks, encode_tasks

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos"

DELETE_SELECTED_PROMPT = "Are you sure you want to delete {count} selected todo(s)?"
CLEAR_ALL_PROMPT = "Are you sure you want to delete ALL todos? This action cannot be undone."


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TaskStore:
    """
    Owner of the task list and the selection set.

    Every mutation goes through this object and, when it changes the list,
    writes the whole list through to the durable mirror before returning.
    The selection is never persisted.

    Invariants (hold after every public call):
    - task ids are unique
    - removing a task always removes its id from the selection
      (toggle_select() itself does not check that the id exists)

    Thread-safety:
    - mutations are serialized with a re-entrant lock
    - a mutation attempted while a confirmation prompt is open (e.g. from
      inside the confirmer) is rejected and logged
    """

    def __init__(
        self,
        mirror: DurableMirror,
        confirmer: Confirmer,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._mirror = mirror
        self._confirmer = confirmer
        self._key = key
        self._clock = clock

        self._tasks: list[Task] = []
        self._selected: set[int] = set()

        self._lock = threading.RLock()
        self._confirming = False

    # ---- read-only views ----

    @property
    def key(self) -> str:
        return self._key

    @property
    def tasks(self) -> tuple[Task, ...]:
        with self._lock:
            return tuple(self._tasks)

    @property
    def selected_ids(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._selected)

    @property
    def total_count(self) -> int:
        with self._lock:
            return len(self._tasks)

    @property
    def selected_count(self) -> int:
        with self._lock:
            return len(self._selected)

    def is_selected(self, task_id: int) -> bool:
        with self._lock:
            return task_id in self._selected

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            for t in self._tasks:
                if t.id == task_id:
                    return t
            return None

    # ---- low-level helpers ----

    @contextmanager
    def _mutation(self, name: str) -> Iterator[bool]:
        """Yield True if the mutation may proceed."""
        with self._lock:
            if self._confirming:
                logger.warning("Rejected %s: a confirmation prompt is still pending.", name)
                yield False
                return
            yield True

    def _ask(self, message: str) -> bool:
        self._confirming = True
        try:
            return bool(self._confirmer.confirm(message))
        finally:
            self._confirming = False

    def _next_id(self) -> int:
        candidate = int(self._clock())
        if self._tasks:
            highest = max(t.id for t in self._tasks)
            if candidate <= highest:
                candidate = highest + 1
        return candidate

    def _commit(self) -> None:
        """Write the current list through to the mirror (fire-and-forget)."""
        try:
            self._mirror.save(self._key, encode_tasks(self._tasks))
        except Exception:
            logger.exception("Mirror save failed key=%s total=%d", self._key, len(self._tasks))

    def _erase(self) -> None:
        try:
            self._mirror.erase(self._key)
        except Exception:
            logger.exception("Mirror erase failed key=%s", self._key)

    # ---- public API ----

    def initialize(self) -> None:
        """
        Seed the list from the mirror once at startup.

        Absent, unreadable or malformed content leaves the list empty.
        The selection always starts empty.
        """
        with self._lock:
            self._tasks = []
            self._selected = set()

            try:
                payload = self._mirror.load(self._key)
            except Exception:
                logger.exception("Mirror load failed key=%s; starting empty.", self._key)
                return

            if payload is None:
                logger.info("No stored todos under key=%s; starting empty.", self._key)
                return

            try:
                self._tasks = decode_tasks(payload)
            except TaskFormatError as e:
                logger.warning("Discarding malformed todos under key=%s: %s", self._key, e)
                return

            logger.info("TaskStore loaded key=%s total=%d", self._key, len(self._tasks))

    def add_task(self, raw_text: str) -> Task | None:
        """Append a task with trimmed text. Blank input is ignored (returns None)."""
        text = (raw_text or "").strip()
        if not text:
            return None

        with self._mutation("add_task") as ok:
            if not ok:
                return None
            task = Task(id=self._next_id(), text=text, completed=False)
            self._tasks.append(task)
            self._commit()
            logger.debug("Task added id=%s total=%d", task.id, len(self._tasks))
            return task

    def toggle_select(self, task_id: int) -> bool:
        """Flip selection for task_id and return whether it is now selected."""
        with self._mutation("toggle_select") as ok:
            if not ok:
                return task_id in self._selected
            if task_id in self._selected:
                self._selected.discard(task_id)
                return False
            self._selected.add(task_id)
            return True

    def delete_selected(self) -> int | None:
        """
        Delete every selected task after confirmation.

        Returns the number of tasks removed, 0 when there was nothing to ask
        about, or None when the user declined.
        """
        with self._mutation("delete_selected") as ok:
            if not ok or not self._selected:
                return 0

            count = len(self._selected)
            if not self._ask(DELETE_SELECTED_PROMPT.format(count=count)):
                logger.info("Delete of %d selected todo(s) declined.", count)
                return None

            doomed = self._selected
            before = len(self._tasks)
            self._tasks = [t for t in self._tasks if t.id not in doomed]
            self._selected = set()
            self._commit()

            removed = before - len(self._tasks)
            logger.info("Deleted %d selected todo(s); %d left.", removed, len(self._tasks))
            return removed

    def delete_one(self, task_id: int) -> bool:
        """Remove a single task without confirmation. Returns False if not found."""
        with self._mutation("delete_one") as ok:
            if not ok:
                return False

            for i, t in enumerate(self._tasks):
                if t.id == task_id:
                    break
            else:
                return False

            del self._tasks[i]
            self._selected.discard(task_id)
            self._commit()
            logger.debug("Task deleted id=%s total=%d", task_id, len(self._tasks))
            return True

    def clear_all(self) -> bool:
        """
        Drop every task after confirmation and erase the mirrored key.

        Returns True if the list was cleared.
        """
        with self._mutation("clear_all") as ok:
            if not ok or not self._tasks:
                return False

            if not self._ask(CLEAR_ALL_PROMPT):
                logger.info("Clear-all declined.")
                return False

            dropped = len(self._tasks)
            self._tasks = []
            self._selected = set()
            self._erase()
            logger.info("Cleared all todos (%d dropped).", dropped)
            return True
