import math

import pytest
from hypothesis import given, strategies as st

from funclang.evaluation.evaluator import evaluate_program
from funclang.evaluation.special_forms.arith_forms import ieee_div
from funclang.reader import read_program
from funclang.types import DynamicError, GlobalEnv


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(- 5)", 5),
        ("(/ 8)", 8),
        ("(/ 1 4)", 0.25),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
    ]
)
def test_concrete_arithmetic(run, source, expected):
    result = run(source)
    assert isinstance(result, float)
    assert result == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(/ 1 0)", math.inf),
        ("(/ -1 0)", -math.inf),
        ("(/ 1 (- 0 0))", math.inf),
    ]
)
def test_division_by_zero_follows_ieee(run, source, expected):
    assert run(source) == expected


def test_zero_over_zero_is_nan(run):
    assert math.isnan(run("(/ 0 0)"))


def test_ieee_div_signed_zero_divisor():
    assert ieee_div(1.0, -0.0) == -math.inf
    assert ieee_div(-2.0, -0.0) == math.inf
    assert ieee_div(6.0, 3.0) == 2.0


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1 #t)", "Operand of + is not a number: #t"),
        ('(- "a" 1)', "Operand of - is not a number: a"),
        ("(* 2 (list 1))", "Operand of * is not a number: (1)"),
        ("(/ 1 (lambda (x) x))", "Operand of / is not a number: (lambda (x) x)"),
    ]
)
def test_non_number_operands_give_dynamic_errors(run, source, message):
    assert run(source) == DynamicError(message)


def test_dynamic_error_operand_is_reported_not_raised(run):
    result = run("(+ 1 undefined-name)")
    assert isinstance(result, DynamicError)
    assert result.message.startswith("Operand of + is not a number")


finite = st.integers(min_value=-10**6, max_value=10**6)


@given(finite, finite)
def test_addition_commutes(a, b):
    env = GlobalEnv()
    left = evaluate_program(read_program(f"(+ {a} {b})"), env)
    right = evaluate_program(read_program(f"(+ {b} {a})"), env)
    assert left == right == a + b


@given(finite, finite)
def test_multiplication_commutes(a, b):
    env = GlobalEnv()
    left = evaluate_program(read_program(f"(* {a} {b})"), env)
    right = evaluate_program(read_program(f"(* {b} {a})"), env)
    assert left == right == a * b
