# src/todo_keeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is created on disk at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

MIRROR_BACKENDS = ("memory", "json", "sqlite")
_DEFAULT_MIRROR_FILES = {
    "json": "todos.json",
    "sqlite": "todos.sqlite3",
}

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Persistence ----
    data_dir: Path
    mirror_backend: str
    mirror_path: Path
    storage_key: str

    # ---- Console ----
    console_enabled: bool
    assume_yes: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        mirror_backend = _env_choice(_k("MIRROR_BACKEND"), MIRROR_BACKENDS, "json")
        default_file = _DEFAULT_MIRROR_FILES.get(mirror_backend, "todos.json")
        mirror_path = _env_path(_k("MIRROR_PATH"), data_dir / default_file)
        storage_key = _env(_k("STORAGE_KEY"), "todos").strip() or "todos"

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        # Auto-confirm destructive prompts (scripted / non-interactive runs).
        assume_yes = _env_bool(_k("ASSUME_YES"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            mirror_backend=mirror_backend,
            mirror_path=mirror_path,
            storage_key=storage_key,
            console_enabled=console_enabled,
            assume_yes=assume_yes,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
