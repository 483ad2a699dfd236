"""Shape checks for FuncLang forms.

The reader only knows about parentheses; this module rejects malformed
special forms before evaluation starts, so the evaluator can destructure
form tails without re-checking them.
"""

from __future__ import annotations

from funclang import Expression
from funclang.errors import FuncLangSyntaxError
from funclang.printer import format_expr
from funclang.types.symbol import Symbol

# name -> (minimum operands, maximum operands or None for n-ary)
FORM_ARITY: dict[str, tuple[int, int | None]] = {
    "+": (0, None),
    "*": (0, None),
    "-": (1, None),
    "/": (1, None),
    "<": (2, 2),
    ">": (2, 2),
    "=": (2, 2),
    "if": (3, 3),
    "let": (2, 2),
    "lambda": (2, 2),
    "define": (2, 2),
    "cons": (2, 2),
    "car": (1, 1),
    "cdr": (1, 1),
    "list": (0, None),
    "null?": (1, 1),
    "pair?": (1, 1),
    "list?": (1, 1),
    "number?": (1, 1),
    "boolean?": (1, 1),
    "string?": (1, 1),
    "procedure?": (1, 1),
    "unit?": (1, 1),
    "unit": (0, 0),
    "eval": (1, 1),
    "read": (1, 1),
}

DEFINE = Symbol("define")


def _fail(message: str, expr: Expression, offset: int | None) -> None:
    raise FuncLangSyntaxError(f"{message}: {format_expr(expr)}", offset)


def _check_arity(name: str, expr: list, offset: int | None) -> None:
    lo, hi = FORM_ARITY[name]
    count = len(expr) - 1
    if count < lo or (hi is not None and count > hi):
        if hi == lo:
            expected = f"exactly {lo}"
        elif hi is None:
            expected = f"at least {lo}"
        else:
            expected = f"{lo} to {hi}"
        _fail(f"'{name}' expects {expected} operand(s), got {count}", expr, offset)


def _check_names(names: list, what: str, expr: list, offset: int | None) -> None:
    seen: set[Symbol] = set()
    for n in names:
        if not isinstance(n, Symbol):
            _fail(f"{what} must be a name", expr, offset)
        if n in seen:
            _fail(f"duplicate {what} '{n}'", expr, offset)
        seen.add(n)


def check_form(expr: Expression, offset: int | None = None, top_level: bool = False) -> None:
    """Raise FuncLangSyntaxError if `expr` (recursively) is not well formed."""
    if not isinstance(expr, list):
        return
    if not expr:
        _fail("empty application", expr, offset)

    head = expr[0]
    name = head.id if isinstance(head, Symbol) else None

    if name not in FORM_ARITY:
        for sub in expr:
            check_form(sub, offset)
        return

    _check_arity(name, expr, offset)

    if name == "define":
        if not top_level:
            _fail("define is only allowed at top level", expr, offset)
        if not isinstance(expr[1], Symbol):
            _fail("define expects a name", expr, offset)
        check_form(expr[2], offset)
    elif name == "lambda":
        formals = expr[1]
        if not isinstance(formals, list):
            _fail("lambda expects a parameter list", expr, offset)
        _check_names(formals, "parameter", expr, offset)
        check_form(expr[2], offset)
    elif name == "let":
        bindings = expr[1]
        if not isinstance(bindings, list):
            _fail("let expects a binding list", expr, offset)
        for b in bindings:
            if not (isinstance(b, list) and len(b) == 2):
                _fail("let binding must be (name expression)", expr, offset)
        _check_names([b[0] for b in bindings], "let name", expr, offset)
        for b in bindings:
            check_form(b[1], offset)
        check_form(expr[2], offset)
    else:
        for sub in expr[1:]:
            check_form(sub, offset)


def is_definition(expr: Expression) -> bool:
    return isinstance(expr, list) and bool(expr) and expr[0] == DEFINE
