from __future__ import annotations

from funclang import Expression, EvaluatorFn
from funclang.errors import FuncLangSyntaxError
from funclang.printer import format_value
from funclang.reader import read_program
from funclang.types import DynamicError, Environment, Value


def eval_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (eval code)
    `code` must evaluate to a string holding a whole program. The program is
    run against the global environment, so its definitions persist.
    """
    # Lazy import to avoid circular imports
    from funclang.evaluation.evaluator import evaluate_program

    code = evaluate_fn(tail[0], env)
    if not isinstance(code, str):
        return DynamicError(f"eval expects a string, got {format_value(code)}")
    try:
        program = read_program(code)
    except FuncLangSyntaxError as e:
        return DynamicError(f"Syntax error in eval: {e}")
    return evaluate_program(program, env.root())
