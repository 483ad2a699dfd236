"""Pair and list primitives: cons car cdr list, and the (unit) literal."""

from __future__ import annotations

from funclang import Expression, EvaluatorFn
from funclang.printer import format_value
from funclang.types import DynamicError, Environment, Pair, Unit, Value, from_sequence


def cons_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    first = evaluate_fn(tail[0], env)
    second = evaluate_fn(tail[1], env)
    return Pair(first, second)


def car_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    value = evaluate_fn(tail[0], env)
    if not isinstance(value, Pair):
        return DynamicError(f"car expects a pair, got {format_value(value)}")
    return value.first


def cdr_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    value = evaluate_fn(tail[0], env)
    if not isinstance(value, Pair):
        return DynamicError(f"cdr expects a pair, got {format_value(value)}")
    return value.second


def list_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    # Left-to-right evaluation, then the chain is built from the last element.
    elems = [evaluate_fn(e, env) for e in tail]
    return from_sequence(elems)


def unit_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return Unit
