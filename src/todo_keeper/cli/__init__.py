"""Command registry, composition root and CLI entrypoint."""
