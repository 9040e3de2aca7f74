# src/todo_keeper/connectors/confirmers.py

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

_YES = {"y", "yes"}


class ConsoleConfirmer:
    """
    Ask on stdin: "<message> [y/N]: ".

    Only y/yes (any case) confirms. EOF and Ctrl+C count as "no".
    """

    def __init__(self, read_line: Callable[[str], str] = input) -> None:
        self._read_line = read_line

    def confirm(self, message: str) -> bool:
        try:
            answer = self._read_line(f"{message} [y/N]: ")
        except (EOFError, KeyboardInterrupt):
            logger.info("Confirmation aborted; treating as 'no'.")
            print()
            return False
        return answer.strip().lower() in _YES


class AutoConfirmer:
    """Answers every prompt the same way (assume-yes mode)."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer

    def confirm(self, message: str) -> bool:
        logger.debug("Auto-%s: %s", "confirmed" if self.answer else "declined", message)
        return self.answer
