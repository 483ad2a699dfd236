"""Immutable pairs. Lists are chains of pairs terminated by Null."""

from __future__ import annotations

from typing import Any, Iterator

from funclang.types.null import Null, NullType


class Pair:
    __slots__ = ("_first", "_second")

    def __init__(self, first: Any, second: Any):
        self._first = first
        self._second = second

    @property
    def first(self) -> Any:
        return self._first

    @property
    def second(self) -> Any:
        return self._second

    def is_list(self) -> bool:
        """True when the chain of second components ends in Null."""
        tail = self._second
        while isinstance(tail, Pair):
            tail = tail._second
        return isinstance(tail, NullType)

    def size(self) -> int:
        if not self.is_list():
            return 2
        return sum(1 for _ in self.iter_list())

    def iter_list(self) -> Iterator[Any]:
        node: Any = self
        while isinstance(node, Pair):
            yield node._first
            node = node._second

    def __repr__(self) -> str:
        return f"Pair({self._first!r}, {self._second!r})"


def from_sequence(items: list[Any]) -> Any:
    """Build a Null-terminated chain, last element first, preserving order."""
    result: Any = Null
    for item in reversed(items):
        result = Pair(item, result)
    return result
