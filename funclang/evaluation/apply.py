"""Application engine for FuncLang.

Call-by-value: the operator is evaluated first, then every operand left to
right in the caller's environment. The body then runs in the closure's
captured environment extended with the formals; the caller's environment is
never consulted.
"""

from __future__ import annotations

from funclang import Expression, EvaluatorFn
from funclang.printer import format_expr
from funclang.types import Closure, DynamicError, Environment, Value


def apply_closure(fn: Closure, actuals: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    return evaluate_fn(fn.body, fn.bind(actuals))


def apply_call(
    call: Expression,
    operator_expr: Expression,
    operand_exprs: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    operator = evaluate_fn(operator_expr, env)
    if not isinstance(operator, Closure):
        return DynamicError(f"Operator not a function in call {format_expr(call)}")

    actuals = [evaluate_fn(e, env) for e in operand_exprs]
    if len(actuals) != operator.arity:
        return DynamicError(f"Argument mismatch in call {format_expr(call)}")

    return apply_closure(operator, actuals, evaluate_fn)
