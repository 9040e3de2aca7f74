# src/todo_keeper/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Any other line is saved as a new todo.")
        return "\n".join(lines)


registry = CommandRegistry()


def format_counters(state: AppState) -> str:
    store = state.task_store
    return f"Total todos: {store.total_count} | Selected: {store.selected_count}"


def format_task_list(state: AppState) -> str:
    store = state.task_store
    tasks = store.tasks
    if not tasks:
        return "No todos yet. Add one above!"
    lines = []
    for i, t in enumerate(tasks, start=1):
        mark = "x" if store.is_selected(t.id) else " "
        lines.append(f"{i:>3}. [{mark}] {t.text}")
    lines.append(format_counters(state))
    return "\n".join(lines)


def _task_at(state: AppState, raw: str) -> Task | None:
    """Resolve a 1-based list position to a task."""
    try:
        pos = int(raw)
    except ValueError:
        return None
    tasks = state.task_store.tasks
    if pos < 1 or pos > len(tasks):
        return None
    return tasks[pos - 1]


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return format_task_list(state)


def cmd_count(state: AppState, args: list[str]) -> str:
    return format_counters(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    task = state.task_store.add_task(" ".join(args))
    if task is None:
        return "Nothing to save: the todo text is empty."
    return f"Saved: {task.text}"


def cmd_select(state: AppState, args: list[str]) -> str:
    """
    /select 2      -> toggle item #2
    /select 1 3 4  -> toggle several items
    """
    if not args:
        return "Usage: /select <n> [n ...] (positions as shown by /list)."

    # Resolve every position first so a typo doesn't leave a half-applied toggle.
    targets: list[Task] = []
    for raw in args:
        task = _task_at(state, raw)
        if task is None:
            return f"No todo at position {raw!r}. Use /list to see positions."
        targets.append(task)

    lines = []
    for task in targets:
        selected = state.task_store.toggle_select(task.id)
        lines.append(f"{'Selected' if selected else 'Unselected'}: {task.text}")
    lines.append(format_counters(state))
    return "\n".join(lines)


def cmd_delete(state: AppState, args: list[str]) -> str:
    store = state.task_store
    if store.selected_count == 0:
        return "Nothing selected. Use /select <n> first."
    removed = store.delete_selected()
    if removed is None:
        return "Cancelled. Nothing was deleted."
    return f"Deleted {removed} todo(s).\n{format_counters(state)}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <n> (position as shown by /list)."
    task = _task_at(state, args[0])
    if task is None:
        return f"No todo at position {args[0]!r}. Use /list to see positions."
    if not state.task_store.delete_one(task.id):
        return "That todo is already gone."
    return f"Deleted: {task.text}\n{format_counters(state)}"


def cmd_flush(state: AppState, args: list[str]) -> str:
    store = state.task_store
    if store.total_count == 0:
        return "The list is already empty."
    if not store.clear_all():
        return "Cancelled. Nothing was deleted."
    return "All todos deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show todos with positions and selection.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Save a todo: /add <text>.")
registry.register(
    "select",
    cmd_select,
    help_text="Toggle selection: /select <n> [n ...].",
    aliases=["sel", "toggle"],
)
registry.register("delete", cmd_delete, help_text="Delete selected todos (asks first).", aliases=["del"])
registry.register("rm", cmd_rm, help_text="Delete one todo right away: /rm <n>.")
registry.register("flush", cmd_flush, help_text="Delete ALL todos (asks first).", aliases=["clear"])
registry.register("count", cmd_count, help_text="Show total and selected counters.", aliases=["status"])
