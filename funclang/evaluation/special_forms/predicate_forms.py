"""Variant tests: null? pair? list? number? boolean? string? procedure? unit?

Each test also accepts an abstract operand and answers per token, keeping
error tokens as they are.
"""

from __future__ import annotations

from typing import Callable

from funclang import Expression, EvaluatorFn
from funclang.evaluation.lattice import abstract_predicate
from funclang.types import (
    AbstractToken,
    AbstractValue,
    BOOLEAN_TOKENS,
    Closure,
    Environment,
    NullType,
    NUMBER_TOKENS,
    Pair,
    UnitType,
    Value,
)

FormFn = Callable[[list[Expression], Environment, EvaluatorFn], Value]


def _predicate(test: Callable[[Value], bool], accepts: frozenset[AbstractToken] = frozenset()) -> FormFn:
    def form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
        value = evaluate_fn(tail[0], env)
        if isinstance(value, AbstractValue):
            return abstract_predicate(value, accepts)
        return test(value)
    return form


def _is_list(value: Value) -> bool:
    if isinstance(value, Pair):
        return value.is_list()
    return isinstance(value, NullType)


null_form = _predicate(lambda v: isinstance(v, NullType))
pair_form = _predicate(lambda v: isinstance(v, Pair))
list_p_form = _predicate(_is_list)
number_form = _predicate(lambda v: isinstance(v, float), NUMBER_TOKENS)
boolean_form = _predicate(lambda v: isinstance(v, bool), BOOLEAN_TOKENS)
string_form = _predicate(lambda v: isinstance(v, str))
procedure_form = _predicate(lambda v: isinstance(v, Closure))
unit_p_form = _predicate(lambda v: isinstance(v, UnitType))
