# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import format_counters, format_task_list
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Process one line of console input.

    Slash commands go to the registry; any other non-blank line is saved
    as a new todo (Enter is the commit key). Returns the reply to print,
    or None for blank input.
    """
    text = line.strip()
    if not text:
        return None

    with state.lock:
        try:
            reply = command_registry.handle(state, text)
        except Exception:
            logger.exception("Command handler crashed.")
            return "Internal error while handling a command."

        if reply is not None:
            return reply

        task = state.task_store.add_task(text)

    if task is None:
        return None
    return f"Saved: {task.text}\n{format_counters(state)}"


def run_console_loop(state: AppState, read_line: Callable[[str], str] = input) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo"))
    logger.info("Console connector started (todos=%d).", state.task_store.total_count)
    _print_ts(f"[{app_name}] Type a todo and press Enter to save it. Use /help for commands, /exit to quit.\n")
    print(format_task_list(state))

    while True:
        try:
            user_input = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            _print_ts(reply)

    logger.info("Console connector finished.")
