"""The standard environment: constants and builtin functions.

Builtins are plain Python callables taking ``(env, args)`` where args are
already-evaluated values.
"""

from __future__ import annotations

from typing import Any

from drift import LispValue
from drift.errors import DriftArityError, DriftTypeError
from drift.printer import display
from drift.types.environment import Environment
from drift.types.nil import Nil
from drift.types.value import is_truthy, kind_of


def _expect_arity(name: str, args: list[Any], count: int) -> None:
    if len(args) != count:
        raise DriftArityError(f"{name} expects {count} argument(s), but got {len(args)}")


def _expect_list(name: str, value: LispValue) -> list:
    if not isinstance(value, list):
        raise DriftTypeError(f"{name} expects a list, got {kind_of(value).value}")
    return value


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated display forms of args followed by newline; returns null."""
    print(" ".join(display(a) for a in args))
    return Nil


def length(env: Environment, args: list[LispValue]) -> int:
    _expect_arity("length", args, 1)
    value = args[0]
    if not isinstance(value, (list, str)):
        raise DriftTypeError(f"length expects a list or string, got {kind_of(value).value}")
    return len(value)


def nth(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("nth", args, 2)
    items, index = _expect_list("nth", args[0]), args[1]
    if not isinstance(index, int) or isinstance(index, bool):
        raise DriftTypeError(f"nth expects an integer index, got {kind_of(index).value}")
    if not 0 <= index < len(items):
        return Nil
    return items[index]


def first(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("first", args, 1)
    items = _expect_list("first", args[0])
    return items[0] if items else Nil


def rest(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("rest", args, 1)
    return _expect_list("rest", args[0])[1:]


def logical_not(env: Environment, args: list[LispValue]) -> bool:
    _expect_arity("not", args, 1)
    return not is_truthy(args[0])


def equals(env: Environment, args: list[LispValue]) -> bool:
    if len(args) <= 1:
        return True
    first_value = args[0]
    return all(kind_of(other) is kind_of(first_value) and other == first_value for other in args[1:])


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update(
        {
            "true": True,
            "false": False,
            "null": Nil,
            "print": print_builtin,
            "length": length,
            "nth": nth,
            "first": first,
            "rest": rest,
            "not": logical_not,
            "eq": equals,
        }
    )


def standard_environment() -> Environment:
    env = Environment()
    register(env)
    return env
