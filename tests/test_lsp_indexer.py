import pytest

from funclang_lsp.indexer import BUILTIN_SIGNATURES, build_index, position_from_offset
from funclang.evaluation.special_forms import SPECIAL_FORMS

SOURCE = """\
(define x 1)
(define f (lambda (a) a))
; a comment (define hidden 2)
(f x)
"""


def test_index_collects_top_level_definitions():
    idx = build_index(SOURCE)
    assert set(idx.symbols) == {"x", "f"}
    assert idx.symbols["x"].kind == "var"
    assert (idx.symbols["x"].line, idx.symbols["x"].col) == (0, 8)
    assert idx.symbols["f"].kind == "function"
    assert idx.symbols["f"].line == 1
    assert idx.syntax_error is None


def test_index_ignores_nested_defines():
    idx = build_index("(let ((y 1)) (define z y))")
    assert idx.symbols == {}
    assert idx.syntax_error is not None


def test_index_reports_syntax_error_position():
    idx = build_index("(define x 1)\n(+ 1")
    assert "x" in idx.symbols
    problem = idx.syntax_error
    assert problem.message == "Unmatched '('"
    assert (problem.line, problem.col) == (1, 0)


def test_position_from_offset():
    text = "ab\ncd\nef"
    assert position_from_offset(text, 0) == (0, 0)
    assert position_from_offset(text, 4) == (1, 1)
    assert position_from_offset(text, 6) == (2, 0)


def test_every_form_has_a_signature():
    assert set(BUILTIN_SIGNATURES) == {s.id for s in SPECIAL_FORMS}


# --- server helpers ---

def test_diagnostics_and_hover():
    pytest.importorskip("pygls")
    from lsprotocol.types import DiagnosticSeverity, Position
    from funclang_lsp.server import diagnostics_for, hover_text, word_at

    idx = build_index("(define foo 1)\n(car")
    (diag,) = diagnostics_for(idx)
    assert diag.severity == DiagnosticSeverity.Error
    assert diag.range.start == Position(line=1, character=0)

    assert hover_text(idx, "car") == "(car pair)"
    assert hover_text(idx, "foo") == "foo: var (defined at 1:9)"
    assert hover_text(idx, "bar") is None

    assert word_at("(define foo 1)", Position(line=0, character=9)) == "foo"
    assert word_at("(define foo 1)", Position(line=0, character=0)) is None
    assert word_at("(define foo 1)", Position(line=3, character=0)) is None


def test_clean_document_has_no_diagnostics():
    pytest.importorskip("pygls")
    from funclang_lsp.server import diagnostics_for

    assert diagnostics_for(build_index(SOURCE)) == []


def test_signatures_follow_form_arity():
    from funclang.reader.syntax import FORM_ARITY

    assert BUILTIN_SIGNATURES["-"] == "(- num ...)"
    assert BUILTIN_SIGNATURES["/"] == "(/ num ...)"
    for name, (lo, hi) in FORM_ARITY.items():
        if name in ("let", "lambda"):
            continue
        operands = BUILTIN_SIGNATURES[name][1:-1].split()[1:]
        if hi is None:
            assert operands[-1] == "..."
        else:
            assert len(operands) == lo
