"""Reader entry point: program text -> validated Program."""

from __future__ import annotations

import logging

from funclang.errors import FuncLangSyntaxError
from funclang.reader.parser import lex, TokenStream
from funclang.reader.program import Program
from funclang.reader.syntax import check_form, is_definition

logger = logging.getLogger(__name__)


def read_program(text: str) -> Program:
    """Parse and validate a whole program.

    Raises FuncLangSyntaxError without returning a partial program.
    """
    program = Program()
    stream = TokenStream(lex(text))
    try:
        for expr, offset in stream.parse_all():
            if program.main is not None:
                raise FuncLangSyntaxError("Only one main expression may follow the definitions", offset)
            check_form(expr, offset, top_level=True)
            if is_definition(expr):
                program.definitions.append(expr)
            else:
                program.main = expr
    except RecursionError:
        raise FuncLangSyntaxError("Expression nested too deeply", stream.last_offset) from None
    logger.debug("read %d definition(s), main=%s", len(program.definitions), program.main is not None)
    return program


__all__ = ["Program", "read_program", "lex", "TokenStream", "check_form"]
