import logging

import pytest

from drift.errors import DriftArityError, DriftNameError, DriftUnboundSymbol
from drift.types.lambda_fn import Closure
from drift.types.nil import Nil


# ------------------ define / set ------------------

def test_define_then_lookup(interp):
    assert interp.eval("(define x 5) (define y (+ x 3)) (y)") == 8
    assert interp.env.lookup("y") == 8


def test_define_returns_the_stored_value(interp):
    assert interp.eval("(define x (list 1 2))") == [1, 2]


def test_redefinition_fails(interp):
    interp.eval("(define x 1)")
    with pytest.raises(DriftNameError):
        interp.eval("(define x 2)")
    assert interp.eval("(x)") == 1


def test_set_unbound_fails(interp):
    with pytest.raises(DriftUnboundSymbol):
        interp.eval("(set nothing 1)")
    assert interp.env.find("nothing") is None


def test_set_overwrites_and_returns_value(interp):
    assert interp.eval("(define x 1) (set x (+ x 4))") == 5
    assert interp.eval("(x)") == 5


def test_set_inside_lambda_updates_outer_binding(interp):
    interp.eval("(define counter 0) (define bump (lambda () (set counter (+ counter 1))))")
    interp.eval("(bump) (bump)")
    assert interp.eval("(counter)") == 2


def test_define_inside_lambda_stays_local(interp):
    interp.eval("(define f (lambda () (define z 1) (+ z 1)))")
    assert interp.eval("(f)") == 2
    # a fresh scope per call, so defining again is fine
    assert interp.eval("(f)") == 2
    assert interp.env.find("z") is None


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if 0 1 2)", 2),
        ("(if 1 1 2)", 1),
        ("(if 7 1 2)", 1),
        ("(if 0.0 1 2)", 1),
        ('(if "" 1 2)', 1),
        ("(if (list) 1 2)", 1),
        ("(if null 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if true 1 2)", 1),
        ("(if (- 1 1) 1 2)", 2),
        ("(if (lambda () 0) 1 2)", 2),
        ("(if 1 (list 1) (list 2))", [1]),
    ]
)
def test_if(interp, source, expected):
    assert interp.eval(source) == expected


def test_if_evaluates_only_the_selected_branch(interp):
    assert interp.eval("(if 1 5 (undefined_fn))") == 5
    assert interp.eval("(if 0 (undefined_fn) 6)") == 6


@pytest.mark.parametrize("source", ["(if 1 2)", "(if 1)", "(if 1 2 3 4)"])
def test_if_requires_both_branches(interp, source):
    with pytest.raises(DriftArityError):
        interp.compile(source)


# ------------------ lambda ------------------

def test_lambda_evaluates_to_closure(interp):
    fn = interp.eval("(lambda (a b) (+ a b))")
    assert isinstance(fn, Closure)
    assert fn.parameters == ["a", "b"]
    assert fn(interp.env, [2, 3]) == 5


def test_lambda_call(interp):
    assert interp.eval("(define add (lambda (a b) (+ a b))) (add 2 3)") == 5


def test_lambda_arguments_are_evaluated_in_caller_scope(interp):
    assert interp.eval("(define a 10) (define add (lambda (a b) (+ a b))) (add (+ a 1) a)") == 21


def test_lambda_argument_count_mismatch_is_not_fatal(interp, caplog):
    interp.eval("(define k (lambda (a b) a))")
    with caplog.at_level(logging.WARNING, logger="drift.types.lambda_fn"):
        assert interp.eval("(k 1)") == 1
    assert "does not match what it was specified with: 1 vs 2" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger="drift.types.lambda_fn"):
        assert interp.eval("(k 1 2 3)") == 1
    assert "3 vs 2" in caplog.text


def test_missing_parameter_is_unbound_in_body(interp, caplog):
    interp.eval("(define add (lambda (a b) (+ a b)))")
    with caplog.at_level(logging.WARNING, logger="drift.types.lambda_fn"):
        with pytest.raises(DriftUnboundSymbol):
            interp.eval("(add 2)")
    assert "1 vs 2" in caplog.text


def test_lambda_body_runs_in_order_and_returns_last(interp):
    interp.eval("(define log (list))")
    assert interp.eval("(define f (lambda (x) (set log (list x)) (+ x 1))) (f 4)") == 5
    assert interp.eval("(log)") == [4]


def test_parameter_shadowing_is_restored_after_call(interp):
    interp.eval("(define x 1) (define f (lambda (x) (+ x 10)))")
    assert interp.eval("(f 5)") == 15
    assert interp.eval("(x)") == 1


def test_scope_is_restored_after_error_in_body(interp):
    interp.eval("(define x 1) (define bad (lambda (x) (undefined_thing)))")
    with pytest.raises(DriftUnboundSymbol):
        interp.eval("(bad 2)")
    assert interp.eval("(x)") == 1


def test_closure_captures_defining_scope(interp):
    interp.eval("(define make_adder (lambda (n) (lambda (m) (+ n m))))")
    interp.eval("(define add1 (make_adder 1)) (define add5 (make_adder 5))")
    assert interp.eval("(add1 2)") == 3
    assert interp.eval("(add5 2)") == 7


def test_recursion(interp):
    interp.eval("(define sum_to (lambda (n) (if n (+ n (sum_to (- n 1))) 0)))")
    assert interp.eval("(sum_to 4)") == 10


def test_identifier_read_calls_functions(interp):
    assert interp.eval("(define get (lambda () 42)) (+ get 1)") == 43


# ------------------ begin / list ------------------

def test_begin_returns_last(interp):
    assert interp.eval("(define x 0) (begin (set x 1) (set x (+ x 1)) x)") == 2


def test_begin_single(interp):
    assert interp.eval("(begin 9)") == 9


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2 3)", [1, 2, 3]),
        ("(list)", []),
        ('(list 1 (list 2 3) "a")', [1, [2, 3], "a"]),
        ("(list (+ 1 1) 2.5)", [2, 2.5]),
    ]
)
def test_list(interp, source, expected):
    assert interp.eval(source) == expected


def test_list_builds_a_new_list_each_time(interp):
    interp.eval("(define make (lambda () (list 1)))")
    first, second = interp.eval_all("(make) (make)")
    assert first == second
    assert first is not second


# ------------------ calls ------------------

def test_calling_a_non_function_returns_its_value(interp):
    assert interp.eval("(define x 5) (x 1 2)") == 5


def test_calling_an_unbound_name_fails(interp):
    with pytest.raises(DriftUnboundSymbol):
        interp.eval("(nowhere 1)")


def test_builtin_calls(interp):
    assert interp.eval("(length (list 1 2 3))") == 3
    assert interp.eval("(nth (list 1 2 3) 1)") == 2
    assert interp.eval("(nth (list 1) 5)") is Nil
    assert interp.eval("(first (list 4 5))") == 4
    assert interp.eval("(rest (list 4 5))") == [5]
    assert interp.eval("(not 0)") is True
    assert interp.eval("(eq 1 1)") is True


def test_print_builtin(interp, capsys):
    assert interp.eval('(print "a" 1 (list 2 "b"))') is Nil
    assert capsys.readouterr().out == "a 1 (2 b)\n"
