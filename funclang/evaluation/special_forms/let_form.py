from __future__ import annotations

from funclang import Expression, EvaluatorFn
from funclang.types import Environment, Value


def let_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (let ((name expr) ...) body)
    Bindings are simultaneous: every expr sees the enclosing env, not its
    siblings.
    """
    bindings, body = tail
    names = [name for name, _ in bindings]
    values = [evaluate_fn(value_expr, env) for _, value_expr in bindings]
    return evaluate_fn(body, env.extend_all(names, values))
