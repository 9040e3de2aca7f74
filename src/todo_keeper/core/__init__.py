"""Ports and application state shared by connectors and commands."""
