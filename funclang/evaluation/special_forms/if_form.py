from __future__ import annotations

from funclang import Expression, EvaluatorFn
from funclang.evaluation.lattice import lift
from funclang.printer import format_expr
from funclang.types import (
    AbstractToken,
    AbstractValue,
    BOOLEAN_TOKENS,
    DynamicError,
    Environment,
    ERROR_TOKENS,
    Symbol,
    Value,
)

IF = Symbol("if")


def _abstract_if(
    guard: AbstractValue,
    then_expr: Expression,
    else_expr: Expression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> AbstractValue:
    """Explore every branch the guard allows and join what they produce."""
    tokens: set[AbstractToken] = set(guard.errors())
    if guard.tokens - BOOLEAN_TOKENS - ERROR_TOKENS:
        tokens.add(AbstractToken.TypeError)
    if AbstractToken.BTrue in guard:
        tokens.update(lift(evaluate_fn(then_expr, env)).tokens)
    if AbstractToken.BFalse in guard:
        tokens.update(lift(evaluate_fn(else_expr, env)).tokens)
    return AbstractValue(tokens)


def if_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (if guard then else)
    A concrete guard evaluates exactly one branch; an abstract guard may
    evaluate both.
    """
    cond_expr, then_expr, else_expr = tail
    guard = evaluate_fn(cond_expr, env)

    match guard:
        case AbstractValue():
            return _abstract_if(guard, then_expr, else_expr, env, evaluate_fn)
        case bool():
            return evaluate_fn(then_expr if guard else else_expr, env)
    return DynamicError(f"Condition not a boolean in expression {format_expr([IF, *tail])}")
