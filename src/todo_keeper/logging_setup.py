# src/todo_keeper/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

APP_LOGGER_PREFIX = "todo_keeper."

# Per-save/erase traces from the mirrors; they belong in the log file only.
DEFAULT_QUIET_PREFIXES = ("todo_keeper.storage.",)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the REPL readable:
    - todo_keeper logs pass (at the handler's level)
    - "quiet" todo_keeper loggers (mirror backends) only at WARNING+
    - captured Python warnings and any third party only at ERROR+
    """

    def __init__(self, quiet_prefixes: Iterable[str] = DEFAULT_QUIET_PREFIXES) -> None:
        super().__init__()
        self._quiet = tuple(quiet_prefixes)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith(APP_LOGGER_PREFIX):
            if name.startswith(self._quiet):
                return record.levelno >= logging.WARNING
            return True

        return record.levelno >= logging.ERROR


def resolve_level(value: str | int | None, default: int = logging.INFO) -> int:
    """Map "debug"/"INFO"/20/... to a logging level; unknown names fall back to default."""
    if isinstance(value, int):
        return value
    name = str(value or "").strip().upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: str | int = logging.INFO,
    file_level: str | int = logging.DEBUG,
    log_file_name: str = "todo.log",
    quiet_prefixes: Iterable[str] = DEFAULT_QUIET_PREFIXES,
) -> Path:
    """
    Configure logging with:
    - Console handler (stderr): filtered so it does not drown the prompt
    - File handler: everything from file_level up

    Call this ONCE, before the store is built. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / log_file_name

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(resolve_level(console_level))
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter(quiet_prefixes))
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(resolve_level(file_level, logging.DEBUG))
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # warnings.warn(...) -> 'py.warnings' logger (file only unless ERROR+)
    logging.captureWarnings(True)
    return log_file
