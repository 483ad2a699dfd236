"""Abstract values: elements of the sign/boolean/error lattice.

An AbstractValue is a set of AbstractTokens. Each token names a coarse class
of concrete outcomes; the set stands for "any outcome in one of these
classes". The empty set is bottom.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from funclang.errors import FuncLangTypeError


class AbstractToken(Enum):
    NumNeg = "NumNeg"
    NumZero = "NumZero"
    NumPos = "NumPos"
    BTrue = "BTrue"
    BFalse = "BFalse"
    TypeError = "TypeError"
    RuntimeError = "RuntimeError"
    UnsupportedTypeError = "UnsupportedTypeError"
    UnsupportedFunctionError = "UnsupportedFunctionError"

    def __repr__(self):
        return self.value


NUMBER_TOKENS = frozenset({AbstractToken.NumNeg, AbstractToken.NumZero, AbstractToken.NumPos})
BOOLEAN_TOKENS = frozenset({AbstractToken.BTrue, AbstractToken.BFalse})
ERROR_TOKENS = frozenset({
    AbstractToken.TypeError,
    AbstractToken.RuntimeError,
    AbstractToken.UnsupportedTypeError,
    AbstractToken.UnsupportedFunctionError,
})

_ORDER = {tok: i for i, tok in enumerate(AbstractToken)}
_BY_NAME = {tok.value.lower(): tok for tok in AbstractToken}


class AbstractValue:
    __slots__ = ("tokens",)

    def __init__(self, tokens: Iterable[AbstractToken] = ()):
        self.tokens: frozenset[AbstractToken] = frozenset(tokens)

    @classmethod
    def of(cls, *tokens: AbstractToken) -> AbstractValue:
        return cls(tokens)

    @classmethod
    def bottom(cls) -> AbstractValue:
        return cls()

    @classmethod
    def any_num(cls) -> AbstractValue:
        return cls(NUMBER_TOKENS)

    @classmethod
    def any_bool(cls) -> AbstractValue:
        return cls(BOOLEAN_TOKENS)

    @classmethod
    def parse(cls, text: str) -> AbstractValue:
        """Parse `num`, `bool`, or a comma-separated list of token names."""
        spec = text.strip().lower()
        if spec == "num":
            return cls.any_num()
        if spec == "bool":
            return cls.any_bool()
        tokens = []
        for part in spec.split(","):
            part = part.strip()
            if not part:
                continue
            tok = _BY_NAME.get(part)
            if tok is None:
                raise FuncLangTypeError(f"Unknown abstract token: {part!r}")
            tokens.append(tok)
        return cls(tokens)

    def is_bottom(self) -> bool:
        return not self.tokens

    def errors(self) -> frozenset[AbstractToken]:
        return self.tokens & ERROR_TOKENS

    def join(self, other: AbstractValue) -> AbstractValue:
        return AbstractValue(self.tokens | other.tokens)

    def sorted_tokens(self) -> list[AbstractToken]:
        return sorted(self.tokens, key=_ORDER.__getitem__)

    def __contains__(self, token: AbstractToken) -> bool:
        return token in self.tokens

    def __iter__(self):
        return iter(self.sorted_tokens())

    def __len__(self) -> int:
        return len(self.tokens)

    def __eq__(self, other):
        return isinstance(other, AbstractValue) and self.tokens == other.tokens

    def __hash__(self):
        return hash(self.tokens)

    def __str__(self):
        return "{" + ", ".join(t.value for t in self.sorted_tokens()) + "}"

    def __repr__(self):
        return f"AbstractValue({self})"
