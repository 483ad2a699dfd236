"""
Lightweight indexer for FuncLang files without evaluating code.

We scan for top-level (define name ...) forms and record where each name is
defined, and run the real reader to report the first syntax error. The scan
itself is tolerant so that partial buffers still produce an index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import re

from funclang.errors import FuncLangSyntaxError
from funclang.reader import read_program

# Simple token patterns for scanning
TOKEN_REGEX = re.compile(
    r"\s+|;.*$|\(|\)|\"(?:\\.|[^\"\\])*\"?|[^\s()\";]+",
    re.MULTILINE,
)


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    syntax_error: Optional[SyntaxProblem] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace() or tok.startswith(";"):
            continue
        yield tok, m.start(), m.end()


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    depth = 0
    for i, (tok, start, end) in enumerate(tokens):
        if tok == "(":
            # (define name value) at depth 0
            if depth == 0 and i + 2 < len(tokens) and tokens[i + 1][0] == "define":
                name, s, _ = tokens[i + 2]
                if name not in ("(", ")") and not name.startswith('"'):
                    line, col = position_from_offset(text, s)
                    is_fn = i + 4 < len(tokens) and tokens[i + 3][0] == "(" and tokens[i + 4][0] == "lambda"
                    idx.symbols[name] = SymbolDef(name=name, kind="function" if is_fn else "var", line=line, col=col)
            depth += 1
        elif tok == ")":
            depth = max(0, depth - 1)

    try:
        read_program(text)
    except FuncLangSyntaxError as e:
        offset = e.position if e.position is not None and e.position >= 0 else 0
        line, col = position_from_offset(text, offset)
        idx.syntax_error = SyntaxProblem(message=str(e), line=line, col=col)

    return idx


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ num ...)",
    "-": "(- num ...)",
    "*": "(* num ...)",
    "/": "(/ num ...)",
    "<": "(< a b)",
    ">": "(> a b)",
    "=": "(= a b)",
    "if": "(if guard then else)",
    "let": "(let ((name expr) ...) body)",
    "lambda": "(lambda (formal ...) body)",
    "define": "(define name expr)",
    "cons": "(cons first second)",
    "car": "(car pair)",
    "cdr": "(cdr pair)",
    "list": "(list elem ...)",
    "unit": "(unit)",
    "null?": "(null? v)",
    "pair?": "(pair? v)",
    "list?": "(list? v)",
    "number?": "(number? v)",
    "boolean?": "(boolean? v)",
    "string?": "(string? v)",
    "procedure?": "(procedure? v)",
    "unit?": "(unit? v)",
    "eval": "(eval program-text)",
    "read": "(read file-name)",
}
