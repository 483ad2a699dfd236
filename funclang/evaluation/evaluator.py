"""Core evaluator for FuncLang.

A single recursive function walks the s-expression tree: literals evaluate
to themselves, symbols are looked up, forms whose head is registered in
SPECIAL_FORMS are dispatched through that table, and every other list is a
function application.
"""

from __future__ import annotations

import logging

from funclang import Expression
from funclang.errors import FuncLangError, FuncLangUnboundSymbol
from funclang.evaluation.apply import apply_call
from funclang.evaluation.special_forms import SPECIAL_FORMS
from funclang.reader.program import Program
from funclang.types import DynamicError, Environment, GlobalEnv, Symbol, Unit, Value

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment) -> Value:
    """Evaluate one expression in `env`."""
    match expr:
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)
        case [operator, *operands]:
            return apply_call(expr, operator, operands, env, evaluate)
        case []:
            return DynamicError("Empty application")
        case Symbol():
            try:
                return env.lookup(expr)
            except FuncLangUnboundSymbol as e:
                return DynamicError(str(e))
        case bool() | float() | str():
            return expr
        case int():
            return float(expr)
    return DynamicError(f"Cannot evaluate {expr!r}")


def evaluate_program(program: Program, env: GlobalEnv) -> Value:
    """Install each definition into `env`, then evaluate the main expression.

    Any host-level FuncLangError (and running out of stack) is turned into a
    DynamicError so that evaluation never aborts the caller.
    """
    try:
        for definition in program.definitions:
            evaluate(definition, env)
        if program.main is None:
            return Unit
        return evaluate(program.main, env)
    except FuncLangError as e:
        logger.debug("program aborted: %s", e)
        return DynamicError(str(e))
    except RecursionError:
        logger.debug("program exceeded the host recursion limit")
        return DynamicError("Maximum recursion depth exceeded")
