import pytest

from funclang.evaluation.evaluator import evaluate, evaluate_program
from funclang.reader import read_program
from funclang.types import Closure, DynamicError, Symbol, Unit


def test_literals_evaluate_to_themselves(env):
    assert evaluate(5.0, env) == 5.0
    assert evaluate("hi", env) == "hi"
    assert evaluate(True, env) is True


def test_unbound_symbol_is_a_dynamic_error(env):
    result = evaluate(Symbol("nope"), env)
    assert result == DynamicError("No binding found for name: nope")


def test_define_installs_into_global_env(run, env):
    assert run("(define x 41)") is Unit
    assert env.lookup(Symbol("x")) == 41.0
    assert run("(+ x 1)") == 42.0


def test_later_definition_shadows_earlier(run):
    assert run("(define x 1) (define x 2) x") == 2.0


def test_definitions_see_earlier_definitions(run):
    assert run("(define a 2) (define b (* a 3)) b") == 6.0


def test_if_evaluates_one_branch(run):
    assert run("(if #t 1 (car 0))") == 1.0
    assert run("(if #f (car 0) 2)") == 2.0


def test_if_with_non_boolean_guard(run):
    assert run("(if 1 2 3)") == DynamicError("Condition not a boolean in expression (if 1 2 3)")


def test_let_binds_locally(run):
    assert run("(let ((x 2) (y 3)) (* x y))") == 6.0


def test_let_bindings_are_simultaneous(run):
    assert run("(define x 10) (let ((x 1) (y x)) y)") == 10.0


def test_let_does_not_leak(run):
    result = run("(define f (lambda () (let ((z 1)) z))) (define r (f)) z")
    assert isinstance(result, DynamicError)


def test_lambda_creates_closure(run):
    fn = run("(lambda (x y) (+ x y))")
    assert isinstance(fn, Closure)
    assert fn.arity == 2
    assert fn.formals == [Symbol("x"), Symbol("y")]


def test_lambda_body_is_not_evaluated_at_creation(run):
    assert isinstance(run("(lambda () (car 1))"), Closure)


def test_application(run):
    assert run("((lambda (x y) (- x y)) 10 4)") == 6.0


def test_closure_capture(run):
    source = """
    (define adder (let ((x 1)) (lambda (y) (+ x y))))
    (define x 100)
    (adder 2)
    """
    assert run(source) == 3.0


def test_closure_sees_later_global_definitions(run):
    source = """
    (define f (lambda (n) (g n)))
    (define g (lambda (n) (* n 2)))
    (f 21)
    """
    assert run(source) == 42.0


def test_no_dynamic_scoping(run):
    source = """
    (define f (lambda () y))
    (let ((y 5)) (f))
    """
    assert isinstance(run(source), DynamicError)


def test_recursion(run):
    source = """
    (define fact (lambda (n) (if (< n 1) 1 (* n (fact (- n 1))))))
    (fact 10)
    """
    assert run(source) == 3628800.0


def test_higher_order_functions(run):
    source = """
    (define map (lambda (f xs) (if (null? xs) (list) (cons (f (car xs)) (map f (cdr xs))))))
    (define sum (lambda (xs) (if (null? xs) 0 (+ (car xs) (sum (cdr xs))))))
    (sum (map (lambda (x) (* x x)) (list 1 2 3)))
    """
    assert run(source) == 14.0


@pytest.mark.parametrize(
    "source, message",
    [
        ("(1 2)", "Operator not a function in call (1 2)"),
        ('("f")', 'Operator not a function in call ("f")'),
        ("((lambda (x) x))", "Argument mismatch in call ((lambda (x) x))"),
        ("((lambda (x) x) 1 2)", "Argument mismatch in call ((lambda (x) x) 1 2)"),
        ("(undefined 1)", "Operator not a function in call (undefined 1)"),
    ]
)
def test_application_errors(run, source, message):
    assert run(source) == DynamicError(message)


def test_arguments_evaluated_left_to_right(run):
    source = """
    (define first (lambda (a b) a))
    (first (eval "(define order 1) order") (eval "(define order 2) order"))
    """
    assert run(source) == 1.0
    assert run("order") == 2.0


def test_program_without_main_yields_unit(run):
    assert run("(define x 1)") is Unit


def test_unit_literal(run):
    assert run("(unit)") is Unit
    assert run("(unit? (unit))") is True
    assert run("(unit? 1)") is False


def test_runaway_recursion_is_a_dynamic_error(run):
    result = run("(define loop (lambda (n) (+ 1 (loop n)))) (loop 0)")
    assert result == DynamicError("Maximum recursion depth exceeded")


def test_evaluate_program_reuses_global_env(env):
    evaluate_program(read_program("(define k 7)"), env)
    assert evaluate_program(read_program("(* k 2)"), env) == 14.0


def test_snapshot_is_read_only(run, env):
    run("(define x 1)")
    snap = env.snapshot()
    assert snap[Symbol("x")] == 1.0
    with pytest.raises(TypeError):
        snap[Symbol("y")] = 2.0
