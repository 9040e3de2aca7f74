"""User-facing connectors: console REPL and confirmation prompts."""
