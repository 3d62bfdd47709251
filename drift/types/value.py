"""Value kinds and the compiled-element protocol.

Runtime values are plain Python objects. A compiled sub-expression (an
Element) is either a literal value, used as-is, or a Thunk, which yields a
value when invoked against an explicit environment. Functions, whether
Thunks, lambda Closures or Python builtins, share one calling convention:
``fn(env, args)``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence

from drift import Element, LispValue
from drift.errors import DriftTypeError
from drift.types.environment import Environment
from drift.types.nil import NilType


class Kind(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    NULL = "null"
    FUNCTION = "function"
    LIST = "list"


def kind_of(value: LispValue) -> Kind:
    # bool is a subclass of int, so it has to be tested first
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INTEGER
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, NilType):
        return Kind.NULL
    if isinstance(value, list):
        return Kind.LIST
    if is_function(value):
        return Kind.FUNCTION
    raise DriftTypeError(f"{value!r} is not a drift value")


class Thunk:
    """A compiled expression: invoking it performs the expression's effect."""

    __slots__ = ("fn", "label")

    def __init__(self, fn: Callable[[Environment], LispValue], label: str):
        self.fn = fn
        self.label = label

    def __call__(self, env: Environment, args: Sequence[LispValue] = ()) -> LispValue:
        return self.fn(env)

    def __repr__(self) -> str:
        return f"<thunk {self.label}>"


def is_function(value: LispValue) -> bool:
    return callable(value) and not isinstance(value, type)


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: LispValue) -> bool:
    """Only integer zero and false are falsy; every other kind counts as true."""
    if isinstance(value, (bool, int)):
        return bool(value)
    return True


def invoke(fn: Callable, env: Environment, args: Sequence[LispValue] = ()) -> LispValue:
    return fn(env, list(args))


def resolve(element: Element, env: Environment) -> LispValue:
    """Turn a compiled element into a value: thunks run, literals pass through."""
    if isinstance(element, Thunk):
        return element(env)
    return element


def deferred_lookup(name: str) -> Thunk:
    """Compile a read of `name`.

    The name is resolved when the thunk runs, against whichever environment
    it runs in. A function found under the name is called with no arguments.
    """
    def read(env: Environment) -> LispValue:
        found = env.lookup(name)
        return invoke(found, env) if is_function(found) else found

    return Thunk(read, name)


def constant(value: LispValue, label: str) -> Thunk:
    return Thunk(lambda env: value, label)
