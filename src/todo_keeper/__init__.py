"""
todo-keeper: a local todo list mirrored to durable key-value storage.

Components:
- tasks/: Task model, wire codec and the TaskStore (list + selection owner)
- storage/: durable mirror backends (memory, JSON file, SQLite)
- core/: ports (DurableMirror, Confirmer) and AppState
- connectors/: console REPL and confirmation prompts
- cli/: composition root, slash commands and the entrypoint
"""

__version__ = "0.1.0"
