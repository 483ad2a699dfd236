import pytest
from hypothesis import given, strategies as st

from funclang.errors import FuncLangSyntaxError
from funclang.reader import read_program
from funclang.reader.parser import lex, TokenStream
from funclang.types.symbol import Symbol


# Convert nested list to FuncLang source string
def _to_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_source(e) for e in expr)})"
    return str(expr)


def _parse_one(source):
    return TokenStream(lex(source)).parse_expr()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a", 0)]),
        ("(a b)", [("lparen", "(", 0), ("symbol", "a", 1), ("symbol", "b", 3), ("rparen", ")", 4)]),
        ('"hi"', [("string", '"hi"', 0)]),
        ("#t #f", [("boolean", "#t", 0), ("boolean", "#f", 3)]),
        (" ; comment\n x", [("symbol", "x", 12)]),
        ("#true", [("symbol", "#true", 0)]),
        ("null?", [("symbol", "null?", 0)]),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("42", 42.0),
        ("-3.5", -3.5),
        ("1e3", 1000.0),
        (".5", 0.5),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("abc1", Symbol("abc1")),
        ("#t", True),
        ("#f", False),
        ('"a\\nb"', "a\nb"),
        ('"say \\"hi\\""', 'say "hi"'),
        ("(1 (2 3))", [1.0, [2.0, 3.0]]),
        ("(f)", [Symbol("f")]),
    ]
)
def test_parse_atoms_and_lists(source, expected):
    assert _parse_one(source) == expected


def test_numbers_are_floats():
    value = _parse_one("7")
    assert isinstance(value, float)


def test_parse_all_reports_offsets():
    stream = TokenStream(lex("(a) b\n(c d)"))
    assert list(stream.parse_all()) == [
        ([Symbol("a")], 0),
        (Symbol("b"), 4),
        ([Symbol("c"), Symbol("d")], 6),
    ]


def test_empty_source_parses_to_nothing():
    assert _parse_one("   ; only a comment") is None


@pytest.mark.parametrize(
    "source, position",
    [
        ("(+ 1", 0),
        ("1 )", 2),
        ('"abc', 0),
        ("  (a (b c)", 2),
    ]
)
def test_syntax_errors_carry_position(source, position):
    with pytest.raises(FuncLangSyntaxError) as excinfo:
        read_program(source)
    assert excinfo.value.position == position


@pytest.mark.parametrize(
    "source",
    [
        "()",
        "(if #t 1)",
        "(if #t 1 2 3)",
        "(lambda (x x) x)",
        "(lambda x x)",
        "(lambda (1) 1)",
        "(let ((x)) x)",
        "(let ((x 1) (x 2)) x)",
        "(let (x 1) x)",
        "(+ 1 (define x 2))",
        "(let ((y 1)) (define x y))",
        "(define 1 2)",
        "(define x)",
        "(-)",
        "(/)",
        "(< 1)",
        "(car 1 2)",
        "(unit 1)",
        "(f ())",
        "1 2",
        "(+ 1 2) (define x 1)",
    ]
)
def test_malformed_programs_are_rejected(source):
    with pytest.raises(FuncLangSyntaxError):
        read_program(source)


def test_read_program_splits_definitions_and_main():
    program = read_program("(define x 1) (define y 2) (+ x y)")
    assert [d[1] for d in program.definitions] == [Symbol("x"), Symbol("y")]
    assert program.main == [Symbol("+"), Symbol("x"), Symbol("y")]


def test_read_program_without_main():
    program = read_program("(define x 1)")
    assert program.main is None
    assert len(program.definitions) == 1


def test_false_literal_is_a_main_expression():
    program = read_program("#f")
    assert program.main is False


names = st.sampled_from(["a", "b", "foo", "bar?", "x1"])
atoms = st.one_of(st.integers(min_value=-1000, max_value=1000), names)
trees = st.recursive(atoms, lambda children: st.lists(children, max_size=4), max_leaves=20)


def _expected(tree):
    if isinstance(tree, list):
        return [_expected(t) for t in tree]
    if isinstance(tree, int):
        return float(tree)
    return Symbol(tree)


@given(trees)
def test_parse_of_rendered_tree_is_identity(tree):
    assert _parse_one(_to_source(tree)) == _expected(tree)
