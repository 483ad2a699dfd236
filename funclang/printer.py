"""Text rendering for FuncLang expressions and values.

format_expr turns an s-expression back into source text; it is only used to
build readable DynamicError messages. format_value is the REPL/CLI view of a
runtime value.
"""

from __future__ import annotations

import math
import re
from typing import Any

from funclang import Expression
from funclang.types import (
    AbstractValue,
    Closure,
    DynamicError,
    NullType,
    Pair,
    Symbol,
    UnitType,
)

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t"}
_ESCAPE_RE = re.compile(r'["\\\n\t]')


def format_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "Infinity" if n > 0 else "-Infinity"
    if n.is_integer():
        return str(int(n))
    return repr(n)


def format_expr(expr: Expression) -> str:
    match expr:
        case bool():
            return "#t" if expr else "#f"
        case float() | int():
            return format_number(float(expr))
        case str():
            return '"' + _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], expr) + '"'
        case Symbol():
            return str(expr)
        case list():
            return "(" + " ".join(format_expr(e) for e in expr) + ")"
    return str(expr)


def format_value(value: Any) -> str:
    match value:
        case bool():
            return "#t" if value else "#f"
        case float() | int():
            return format_number(float(value))
        case str():
            return value
        case UnitType():
            return ""
        case NullType():
            return "()"
        case Pair():
            if value.is_list():
                return "(" + " ".join(format_value(v) for v in value.iter_list()) + ")"
            return f"({format_value(value.first)} {format_value(value.second)})"
        case Closure():
            formals = " ".join(str(f) for f in value.formals)
            return f"(lambda ({formals}) {format_expr(value.body)})"
        case DynamicError():
            return value.message
        case AbstractValue():
            return str(value)
    return repr(value)
