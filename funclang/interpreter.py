from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from funclang.evaluation.evaluator import evaluate_program
from funclang.reader import read_program
from funclang.types import AbstractValue, GlobalEnv, Symbol, Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating FuncLang programs.
    Owns the single global environment, so definitions persist across calls.
    """

    def __init__(self, read_roots: list[Path | str] | None = None):
        roots = [Path(r) for r in read_roots] if read_roots is not None else None
        self.env: GlobalEnv = GlobalEnv(read_roots=roots)

    def eval(self, code: str) -> Value:
        """Read and evaluate one program.

        Raises FuncLangSyntaxError for malformed text; every runtime failure
        comes back as a DynamicError value.
        """
        program = read_program(code)
        logger.debug("evaluating program with %d definition(s)", len(program.definitions))
        return evaluate_program(program, self.env)

    def eval_file(self, path: Path | str) -> Value:
        return self.eval(Path(path).read_text(encoding="utf-8"))

    def set_abstract_env(self, bindings: Mapping[str, Any]) -> None:
        """Install inputs into the global environment before evaluation.

        Strings are parsed as abstract value specs (`num`, `bool`,
        `NumPos,NumZero`...); Python ints are widened to floats; anything else
        is installed as is.
        """
        for name, value in bindings.items():
            if isinstance(value, str):
                value = AbstractValue.parse(value)
            elif isinstance(value, int) and not isinstance(value, bool):
                value = float(value)
            logger.info("abstract input %s = %s", name, value)
            self.env.install(Symbol(name), value)

    def snapshot(self) -> Mapping[Symbol, Value]:
        return self.env.snapshot()
