# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Persistence
    "TODO_DATA_DIR": "Local data directory for the mirror and todo.log (default: .local/todo).",
    "TODO_MIRROR_BACKEND": "Where todos are mirrored: json | sqlite | memory (default: json).",
    "TODO_MIRROR_PATH": (
        "Mirror file path (default: <data_dir>/todos.json or <data_dir>/todos.sqlite3)."
    ),
    "TODO_STORAGE_KEY": "Key the todo list is stored under inside the mirror (default: todos).",
    # Console
    "TODO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    "TODO_ASSUME_YES": "Auto-confirm /delete and /flush prompts (true/false, default: false).",
}
