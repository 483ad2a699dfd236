"""
  FuncLang Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of AST node classes:

    - forms   -> Python list
    - names   -> Symbol
    - numbers -> float (every numeric literal is a 64-bit float)
    - #t / #f -> bool
    - strings -> str
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from funclang import Expression
from funclang.errors import FuncLangSyntaxError
from funclang.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<boolean>#[tf](?=[\s()";]|$))'  # #t / #f
    r'|(?P<symbol>[^\s()";]+)',  # fallback: symbols and numbers
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise FuncLangSyntaxError("Unterminated string literal", pos)
            raise FuncLangSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}", pos)
        kind = m.lastgroup
        pos = m.end()
        if kind == "comment":
            continue
        yield kind, m.group(kind), m.start()


def unescape(body: str) -> str:
    return re.sub(r"\\(.)", lambda m: STRING_ESCAPES.get(m.group(1), m.group(1)), body, flags=re.DOTALL)


def atom(text: str) -> Expression:
    if NUMBER_RE.fullmatch(text):
        return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        # offset of the start of the last expression returned by parse_expr
        self.last_offset: int = 0

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def parse_expr(self) -> Expression:
        tok_type, tok_val, offset = self.peek()
        if tok_type is None:
            return None
        self.last_offset = offset
        return self._parse()

    def _parse(self) -> Expression:
        tok_type, tok_val, offset = self.advance()

        if tok_type == "symbol":
            return atom(tok_val)

        if tok_type == "boolean":
            return tok_val == "#t"

        if tok_type == "string":
            return unescape(tok_val[1:-1])

        if tok_type == "lparen":
            items = []
            while True:
                nxt, _, _ = self.peek()
                if nxt == "rparen":
                    self.advance()
                    return items
                if nxt is None:
                    raise FuncLangSyntaxError("Unmatched '('", offset)
                items.append(self._parse())

        if tok_type == "rparen":
            raise FuncLangSyntaxError("Unexpected ')'", offset)

        raise FuncLangSyntaxError(f"Unknown token: {tok_type} {tok_val}", offset)

    def parse_all(self) -> Iterator[tuple[Expression, int]]:
        """Yield (expression, start offset) for every top-level form."""
        while (expr := self.parse_expr()) is not None:
            yield expr, self.last_offset
