"""Closure representation for FuncLang."""

from __future__ import annotations

from typing import Any

from funclang import Expression
from funclang.types.environment import Environment
from funclang.types.symbol import Symbol


class Closure:
    """A first-class function: formal parameters, body, and captured env."""

    __slots__ = ("env", "formals", "body")

    def __init__(self, env: Environment, formals: list[Symbol], body: Expression):
        self.env: Environment = env
        self.formals: list[Symbol] = list(formals)
        self.body: Expression = body

    @property
    def arity(self) -> int:
        return len(self.formals)

    def bind(self, actuals: list[Any]) -> Environment:
        """Extend the captured env with each formal bound to its actual, in order."""
        return self.env.extend_all(self.formals, actuals)

    def __str__(self) -> str:
        from funclang.printer import format_value
        return format_value(self)

    def __repr__(self) -> str:
        return f"Closure({' '.join(str(f) for f in self.formals)})"
