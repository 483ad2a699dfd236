"""Relational forms: < > =."""

from __future__ import annotations

from funclang import Expression, EvaluatorFn
from funclang.evaluation.compare import compare_value, equal_value
from funclang.evaluation.lattice import (
    TokenOp,
    abstract_equal,
    abstract_greater,
    abstract_less,
    combine,
    of_val_bool,
    of_val_num,
)
from funclang.types import AbstractToken, AbstractValue, Environment, Value


def _abstract_compare(v1: Value, v2: Value, op: TokenOp) -> AbstractValue:
    lifted = []
    for v in (v1, v2):
        match v:
            case AbstractValue():
                lifted.append(v)
            case bool():
                lifted.append(of_val_bool(v))
            case float():
                lifted.append(of_val_num(v))
            case _:
                # strings, pairs, closures... have no place in the lattice
                return AbstractValue.of(AbstractToken.BFalse)
    return combine(lifted[0], lifted[1], op)


def _operands(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> tuple[Value, Value]:
    first, second = tail
    return evaluate_fn(first, env), evaluate_fn(second, env)


def _is_abstract(v1: Value, v2: Value) -> bool:
    return isinstance(v1, AbstractValue) or isinstance(v2, AbstractValue)


def less_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    v1, v2 = _operands(tail, env, evaluate_fn)
    if _is_abstract(v1, v2):
        return _abstract_compare(v1, v2, abstract_less)
    return compare_value(v1, v2) < 0


def greater_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    v1, v2 = _operands(tail, env, evaluate_fn)
    if _is_abstract(v1, v2):
        return _abstract_compare(v1, v2, abstract_greater)
    return compare_value(v1, v2) > 0


def equal_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    v1, v2 = _operands(tail, env, evaluate_fn)
    if _is_abstract(v1, v2):
        return _abstract_compare(v1, v2, abstract_equal)
    return equal_value(v1, v2)
