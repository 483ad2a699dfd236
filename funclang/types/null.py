from __future__ import annotations


class NullType:
    """The list terminator. Equal only to itself."""
    __slots__ = ()

    def __repr__(self): return "()"

    def __eq__(self, other):
        return isinstance(other, NullType)

    def __hash__(self):
        return hash(NullType)


class UnitType:
    """Result of definitions; carries no information."""
    __slots__ = ()

    def __repr__(self): return "Unit"

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)


Null = NullType()
Unit = UnitType()
