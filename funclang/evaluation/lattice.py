"""Abstract lattice engine.

Every arithmetic, relational and type-predicate operator gets a token-level
counterpart here. `combine` lifts a token-level operator to whole token sets
by taking the cross product of its operands and joining the results. Error
tokens are sticky: an error present in either operand is always present in
the result, whatever the operator does with it.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterable

from funclang.types import (
    AbstractToken as T,
    AbstractValue,
    BOOLEAN_TOKENS,
    Closure,
    DynamicError,
    ERROR_TOKENS,
    NUMBER_TOKENS,
)

TokenOp = Callable[[T, T], AbstractValue]

_ANY_NUM = frozenset(NUMBER_TOKENS)
_SIGN_ORDER = {T.NumNeg: -1, T.NumZero: 0, T.NumPos: 1}


# ---------------------------------------------------------------------------
# Lifting concrete values
# ---------------------------------------------------------------------------

def of_val_num(value: Any) -> AbstractValue:
    """Number -> its sign class; anything else -> {TypeError}."""
    if isinstance(value, float):
        if value < 0:
            return AbstractValue.of(T.NumNeg)
        if value > 0:
            return AbstractValue.of(T.NumPos)
        if value == 0:
            return AbstractValue.of(T.NumZero)
        # NaN has no sign class
        return AbstractValue.bottom()
    return AbstractValue.of(T.TypeError)


def of_val_bool(value: Any) -> AbstractValue:
    """Boolean -> its boolean class; anything else -> {TypeError}."""
    if isinstance(value, bool):
        return AbstractValue.of(T.BTrue if value else T.BFalse)
    return AbstractValue.of(T.TypeError)


def lift(value: Any) -> AbstractValue:
    """Promote any value into the lattice, for joining control-flow results."""
    match value:
        case AbstractValue():
            return value
        case bool():
            return of_val_bool(value)
        case float():
            return of_val_num(value)
        case DynamicError():
            return AbstractValue.of(T.RuntimeError)
        case Closure():
            return AbstractValue.of(T.UnsupportedFunctionError)
    return AbstractValue.of(T.UnsupportedTypeError)


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------

def combine(fst: AbstractValue, snd: AbstractValue, f: TokenOp) -> AbstractValue:
    """Cross-product join of `f` over two token sets; bottom is the identity."""
    if fst.is_bottom():
        return snd
    if snd.is_bottom():
        return fst
    result: set[T] = set(fst.errors() | snd.errors())
    for a in fst.tokens:
        for b in snd.tokens:
            result.update(f(a, b).tokens)
    return AbstractValue(result)


def combine_arith(values: Iterable[Any], f: TokenOp) -> AbstractValue:
    """Left-fold `combine` over operands, lifting concrete ones with of_val_num."""
    lifted = [v if isinstance(v, AbstractValue) else of_val_num(v) for v in values]
    if not lifted:
        return AbstractValue.bottom()
    return reduce(lambda acc, v: combine(acc, v, f), lifted)


# ---------------------------------------------------------------------------
# Token-level operators
# ---------------------------------------------------------------------------

def _error_of(s1: T, s2: T) -> AbstractValue | None:
    if s1 in ERROR_TOKENS:
        return AbstractValue.of(s1)
    if s2 in ERROR_TOKENS:
        return AbstractValue.of(s2)
    return None


def _non_numeric(s1: T, s2: T) -> bool:
    return s1 in BOOLEAN_TOKENS or s2 in BOOLEAN_TOKENS


def abstract_add(s1: T, s2: T) -> AbstractValue:
    if (err := _error_of(s1, s2)) is not None:
        return err
    if _non_numeric(s1, s2):
        return AbstractValue.of(T.TypeError)
    if s1 is T.NumZero:
        return AbstractValue.of(s2)
    if s2 is T.NumZero:
        return AbstractValue.of(s1)
    if s1 is s2:
        return AbstractValue.of(s1)
    return AbstractValue(_ANY_NUM)


def abstract_sub(s1: T, s2: T) -> AbstractValue:
    if (err := _error_of(s1, s2)) is not None:
        return err
    if _non_numeric(s1, s2):
        return AbstractValue.of(T.TypeError)
    if s2 is T.NumZero:
        return AbstractValue.of(s1)
    if s1 is T.NumZero:
        return AbstractValue.of(T.NumNeg if s2 is T.NumPos else T.NumPos)
    if s1 is not s2:
        return AbstractValue.of(s1)
    return AbstractValue(_ANY_NUM)


def abstract_mul(s1: T, s2: T) -> AbstractValue:
    if (err := _error_of(s1, s2)) is not None:
        return err
    if _non_numeric(s1, s2):
        return AbstractValue.of(T.TypeError)
    if s1 is T.NumZero or s2 is T.NumZero:
        return AbstractValue.of(T.NumZero)
    if s1 is s2:
        return AbstractValue.of(T.NumPos)
    return AbstractValue.of(T.NumNeg)


def abstract_div(s1: T, s2: T) -> AbstractValue:
    if (err := _error_of(s1, s2)) is not None:
        return err
    if _non_numeric(s1, s2):
        return AbstractValue.of(T.TypeError)
    if s2 is T.NumZero:
        return AbstractValue.of(T.RuntimeError)
    if s1 is T.NumZero:
        return AbstractValue.of(T.NumZero)
    if s1 is s2:
        return AbstractValue.of(T.NumPos)
    return AbstractValue.of(T.NumNeg)


def abstract_equal(s1: T, s2: T) -> AbstractValue:
    return AbstractValue.of(T.BTrue if s1 is s2 else T.BFalse)


def abstract_greater(s1: T, s2: T) -> AbstractValue:
    # Non-sign tokens compare as false rather than unknown.
    if s1 not in _SIGN_ORDER or s2 not in _SIGN_ORDER:
        return AbstractValue.of(T.BFalse)
    if s1 is s2 and s1 is not T.NumZero:
        return AbstractValue.any_bool()
    return AbstractValue.of(T.BTrue if _SIGN_ORDER[s1] > _SIGN_ORDER[s2] else T.BFalse)


def abstract_less(s1: T, s2: T) -> AbstractValue:
    return abstract_greater(s2, s1)


def abstract_predicate(value: AbstractValue, accepts: frozenset[T]) -> AbstractValue:
    """Answer a type test per token; error tokens pass through unchanged."""
    result: set[T] = set()
    for tok in value.tokens:
        if tok in ERROR_TOKENS:
            result.add(tok)
        elif tok in accepts:
            result.add(T.BTrue)
        else:
            result.add(T.BFalse)
    return AbstractValue(result)
