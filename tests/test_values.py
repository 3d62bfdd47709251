import pytest

from drift.builtins import equals, print_builtin
from drift.errors import DriftTypeError
from drift.printer import display, format_value
from drift.types.environment import Environment
from drift.types.lambda_fn import Closure
from drift.types.nil import Nil
from drift.types.value import Kind, Thunk, constant, is_truthy, kind_of, resolve


@pytest.mark.parametrize(
    "value,kind",
    [
        (1, Kind.INTEGER),
        (1.5, Kind.FLOAT),
        ("a", Kind.STRING),
        (True, Kind.BOOL),
        (Nil, Kind.NULL),
        ([1, 2], Kind.LIST),
        (Closure(["a"], [1], Environment()), Kind.FUNCTION),
        (constant(1, "1"), Kind.FUNCTION),
        (print_builtin, Kind.FUNCTION),
    ]
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_kind_of_rejects_foreign_values():
    with pytest.raises(DriftTypeError):
        kind_of(object())


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, False),
        (1, True),
        (-3, True),
        (False, False),
        (True, True),
        (0.0, True),
        ("", True),
        (Nil, True),
        ([], True),
    ]
)
def test_is_truthy(value, expected):
    assert is_truthy(value) is expected


def test_resolve_runs_thunks_and_passes_literals():
    env = Environment()
    env.define("x", 3)
    assert resolve(Thunk(lambda e: e.lookup("x") + 1, "x+1"), env) == 4
    assert resolve(7, env) == 7
    assert resolve("x", env) == "x"


def test_nil():
    assert repr(Nil) == "null"
    assert not Nil
    assert Nil == Nil


@pytest.mark.parametrize(
    "value,expected",
    [
        (5, "5"),
        (2.5, "2.5"),
        ("ab", '"ab"'),
        ('say "hi"', "'say \"hi\"'"),
        (True, "true"),
        (False, "false"),
        (Nil, "null"),
        ([1, "a", [2.0]], '(1 "a" (2.0))'),
        (Closure(["a", "b"], [1], Environment()), "<lambda (a b)>"),
        (print_builtin, "<builtin print>"),
    ]
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_display_leaves_strings_unquoted():
    assert display(["a", 1, "b c"]) == "(a 1 b c)"


def test_equals_compares_kind_and_value():
    env = Environment()
    assert equals(env, [1, 1, 1])
    assert not equals(env, [1, True])
    assert not equals(env, [1, 1.0])
    assert equals(env, [[1, 2], [1, 2]])
