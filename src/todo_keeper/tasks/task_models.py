# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

# ASCII digits only; str.isdigit() also accepts superscripts that int() rejects.
_NUMERIC_ID = re.compile(r"-?[0-9]+")


class TaskFormatError(ValueError):
    """Stored task payload does not match the array-of-records format."""


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    # Carried through storage unchanged; nothing toggles it.
    completed: bool = False

    def to_record(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "completed": self.completed}

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON object.

        Accepts:
        - id as int or numeric string
        - missing "completed" (defaults to False)
        """
        if not isinstance(raw, dict):
            raise TaskFormatError(f"task record must be an object, got {type(raw).__name__}")

        return cls(
            id=_parse_id(raw.get("id")),
            text=_parse_text(raw.get("text")),
            completed=_parse_completed(raw.get("completed", False)),
        )


def _parse_id(raw: Any) -> int:
    # bool is an int subclass; true/false is never a valid id.
    if isinstance(raw, bool):
        raise TaskFormatError("task id must be numeric, got a boolean")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _NUMERIC_ID.fullmatch(raw.strip()):
        return int(raw.strip())
    raise TaskFormatError(f"task id must be an integer or numeric string, got {raw!r}")


def _parse_text(raw: Any) -> str:
    if not isinstance(raw, str):
        raise TaskFormatError("task text must be a string")
    if not raw.strip():
        raise TaskFormatError("task text must not be empty")
    return raw


def _parse_completed(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise TaskFormatError(f"task completed flag must be a boolean, got {raw!r}")
    return raw


def encode_tasks(tasks: Iterable[Task]) -> str:
    """Serialize tasks (in order) to the compact JSON array stored in the mirror."""
    return json.dumps([t.to_record() for t in tasks], ensure_ascii=False, separators=(",", ":"))


def decode_tasks(payload: str) -> list[Task]:
    """
    Parse a mirrored payload back into tasks.

    The payload is all-or-nothing: one bad record (or duplicate ids)
    invalidates the whole list.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        raise TaskFormatError(f"payload is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskFormatError(f"payload must be a JSON array, got {type(data).__name__}")

    tasks = [Task.from_record(item) for item in data]
    _ensure_unique_ids(tasks)
    return tasks


def _ensure_unique_ids(tasks: Sequence[Task]) -> None:
    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise TaskFormatError(f"duplicate task id {t.id}")
        seen.add(t.id)
