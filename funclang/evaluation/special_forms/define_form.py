from __future__ import annotations

from funclang import Expression, EvaluatorFn
from funclang.types import Environment, Unit, Value


def define_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (define name value)
    The value is evaluated in the current env and installed in the global one.
    """
    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    env.root().install(name, value)
    return Unit
