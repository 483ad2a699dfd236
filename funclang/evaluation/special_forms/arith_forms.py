"""n-ary arithmetic: + - * /.

Operands are evaluated left to right. If any of them is abstract the whole
operation is folded through the lattice; otherwise every operand must be a
number and the result is ordinary float arithmetic.
"""

from __future__ import annotations

import math

from funclang import Expression, EvaluatorFn
from funclang.evaluation.lattice import (
    abstract_add,
    abstract_div,
    abstract_mul,
    abstract_sub,
    combine_arith,
)
from funclang.printer import format_value
from funclang.types import AbstractValue, DynamicError, Environment, Value


def _operands(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> list[Value]:
    return [evaluate_fn(e, env) for e in tail]


def _any_abstract(values: list[Value]) -> bool:
    return any(isinstance(v, AbstractValue) for v in values)


def _expect_numbers(name: str, values: list[Value]) -> list[float] | DynamicError:
    for v in values:
        if not isinstance(v, float):
            return DynamicError(f"Operand of {name} is not a number: {format_value(v)}")
    return values  # type: ignore[return-value]


def ieee_div(a: float, b: float) -> float:
    """Float division with IEEE-754 results for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def add_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    values = _operands(tail, env, evaluate_fn)
    if _any_abstract(values):
        return combine_arith(values, abstract_add)
    nums = _expect_numbers("+", values)
    if isinstance(nums, DynamicError):
        return nums
    result = 0.0
    for x in nums:
        result += x
    return result


def sub_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    values = _operands(tail, env, evaluate_fn)
    if _any_abstract(values):
        return combine_arith(values, abstract_sub)
    nums = _expect_numbers("-", values)
    if isinstance(nums, DynamicError):
        return nums
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    values = _operands(tail, env, evaluate_fn)
    if _any_abstract(values):
        return combine_arith(values, abstract_mul)
    nums = _expect_numbers("*", values)
    if isinstance(nums, DynamicError):
        return nums
    result = 1.0
    for x in nums:
        result *= x
    return result


def div_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    values = _operands(tail, env, evaluate_fn)
    if _any_abstract(values):
        return combine_arith(values, abstract_div)
    nums = _expect_numbers("/", values)
    if isinstance(nums, DynamicError):
        return nums
    result = nums[0]
    for x in nums[1:]:
        result = ieee_div(result, x)
    return result
