"""Command modules for the pynotes CLI."""

from pynotes.cli.commands import add, export, list_notes, populate, remove

__all__ = ["add", "export", "list_notes", "populate", "remove"]
