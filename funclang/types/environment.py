"""Runtime environments for FuncLang.

Local scopes are persistent chains: `extend` returns a new ExtendEnv node
holding one binding and pointing at its parent, and never touches the parent.
Every chain ends in the single GlobalEnv, the only mutable environment. Top
level definitions are installed there and stay visible to closures created
before or after them.
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from funclang.errors import FuncLangUnboundSymbol
from funclang.types.symbol import Symbol


class Environment:
    """Lookup/extend interface shared by every environment node."""

    __slots__ = ()

    def lookup(self, name: Symbol) -> Any:
        raise NotImplementedError

    def extend(self, name: Symbol, value: Any) -> ExtendEnv:
        return ExtendEnv(self, name, value)

    def extend_all(self, names: list[Symbol], values: list[Any]) -> Environment:
        env: Environment = self
        for name, value in zip(names, values):
            env = env.extend(name, value)
        return env

    def root(self) -> GlobalEnv:
        env = self
        while isinstance(env, ExtendEnv):
            env = env.outer
        return env  # type: ignore[return-value]


class ExtendEnv(Environment):
    __slots__ = ("outer", "name", "value")

    def __init__(self, outer: Environment, name: Symbol, value: Any):
        self.outer = outer
        self.name = name
        self.value = value

    def lookup(self, name: Symbol) -> Any:
        env: Environment = self
        while isinstance(env, ExtendEnv):
            if env.name == name:
                return env.value
            env = env.outer
        return env.lookup(name)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"{{{self.name}: {self.value!r}}}")
            buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Environment = self
            while isinstance(env, ExtendEnv):
                chain.append(f"{{{env.name}: {env.value!r}}}")
                env = env.outer
            chain.append("<global>")
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()


class GlobalEnv(Environment):
    """The process-scoped top-level scope. Append-only."""

    __slots__ = ("vars", "read_roots")

    def __init__(
        self,
        bindings: Mapping[Symbol, Any] | None = None,
        read_roots: list[Path] | None = None,
    ):
        self.vars: dict[Symbol, Any] = {}
        # directories searched by the read form; None means the configured default
        self.read_roots: list[Path] | None = read_roots
        if bindings:
            for name, value in bindings.items():
                self.install(name, value)

    def install(self, name: Symbol | str, value: Any) -> None:
        """Bind `name` to `value`, shadowing any earlier top-level binding."""
        if isinstance(name, str):
            name = Symbol(name)
        self.vars[name] = value

    def lookup(self, name: Symbol) -> Any:
        try:
            return self.vars[name]
        except KeyError:
            raise FuncLangUnboundSymbol(f"No binding found for name: {name}") from None

    def names(self) -> list[Symbol]:
        return list(self.vars)

    def snapshot(self) -> Mapping[Symbol, Any]:
        """Read-only copy of the current bindings."""
        return MappingProxyType(dict(self.vars))

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<GlobalEnv {self}>"
