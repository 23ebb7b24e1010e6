"""Exceptions raised by pynotes."""


class NotesError(Exception):
    """Base pynotes error."""


class MalformedSnapshot(NotesError):
    """A stored snapshot is not a list of ``{title, body}`` string objects."""

    def __init__(self, reason: str, raw=None):
        super().__init__(reason)
        self.reason = reason
        self.raw = raw
