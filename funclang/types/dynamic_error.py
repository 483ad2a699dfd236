from __future__ import annotations


class DynamicError:
    """A recoverable failure carried through evaluation as an ordinary value."""

    __slots__ = ("message",)

    def __init__(self, message: str = "Unknown dynamic error."):
        self.message = message

    def __eq__(self, other):
        return isinstance(other, DynamicError) and self.message == other.message

    def __hash__(self):
        return hash(self.message)

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"DynamicError({self.message!r})"
