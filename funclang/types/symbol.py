from __future__ import annotations

from typing import ClassVar


class Symbol:
    """A name in FuncLang source. One instance exists per distinct name."""

    __slots__ = ("id",)

    _table: ClassVar[dict[str, Symbol]] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = name
            cls._table[name] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self):
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
