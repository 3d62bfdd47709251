"""Arithmetic forms, keyed by operator character.

Operands are resolved left to right each time the form runs, then folded.
`+` concatenates when its first operand is a string.
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Callable

from drift import Element, LispValue
from drift.errors import DriftArithmeticError, DriftArityError, DriftTypeError
from drift.types.environment import Environment
from drift.types.value import Thunk, is_number, kind_of, resolve


def _operands(symbol: str, elements: list[Element], env: Environment) -> list[LispValue]:
    values = [resolve(element, env) for element in elements]
    for value in values:
        if not is_number(value):
            raise DriftTypeError(
                f"All arguments to {symbol} must be numbers, got {kind_of(value).value}"
            )
    return values


def add_form(elements: list[Element]) -> Thunk:
    def run(env: Environment) -> LispValue:
        values = [resolve(element, env) for element in elements]
        if values and isinstance(values[0], str):
            if not all(isinstance(v, str) for v in values):
                raise DriftTypeError("+ on strings expects only string arguments")
            return "".join(values)
        for value in values:
            if not is_number(value):
                raise DriftTypeError(
                    f"All arguments to + must be numbers, got {kind_of(value).value}"
                )
        return reduce(operator.add, values, 0)

    return Thunk(run, "+")


def mul_form(elements: list[Element]) -> Thunk:
    def run(env: Environment) -> LispValue:
        values = _operands("*", elements, env)
        if len(values) < 2:
            raise DriftArityError(f"* expects at least 2 arguments, but got {len(values)}")
        return reduce(operator.mul, values)

    return Thunk(run, "*")


def sub_form(elements: list[Element]) -> Thunk:
    def run(env: Environment) -> LispValue:
        values = _operands("-", elements, env)
        if not values:
            raise DriftArityError("- requires at least 1 argument")
        if len(values) == 1:
            return -values[0]
        return reduce(operator.sub, values)

    return Thunk(run, "-")


def _divide(a: LispValue, b: LispValue) -> LispValue:
    if b == 0:
        raise DriftArithmeticError("division by zero")
    # exact integer quotients stay integers
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    try:
        return a / b
    except OverflowError as e:
        raise DriftArithmeticError("division result too large") from e


def div_form(elements: list[Element]) -> Thunk:
    def run(env: Environment) -> LispValue:
        values = _operands("/", elements, env)
        if not values:
            raise DriftArityError("/ requires at least 1 argument")
        if len(values) == 1:
            return _divide(1, values[0])
        return reduce(_divide, values)

    return Thunk(run, "/")


ARITH_FORMS: dict[str, Callable[[list[Element]], Thunk]] = {
    "+": add_form,
    "-": sub_form,
    "*": mul_form,
    "/": div_form,
}
