from funclang import Expression, EvaluatorFn
from funclang.types import Closure, Environment, Value


def lambda_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    # The body is not touched until the closure is applied.
    formals, body = tail
    return Closure(env, formals, body)
