from drift import Element, LispValue
from drift.errors import DriftArityError, DriftInvalidSymbol
from drift.types.environment import Environment
from drift.types.value import Thunk, kind_of, resolve


def define_form(elements: list[Element], _: list[str]) -> Thunk:
    """
    (define name value)
    Binds in the scope the form runs in and returns the stored value.
    """
    if len(elements) != 2:
        raise DriftArityError(f"define expects 2 arguments, but got {len(elements)}")

    name, value = elements

    def run(env: Environment) -> LispValue:
        if not isinstance(name, str):
            raise DriftInvalidSymbol(
                f"define expects an identifier as its first arg but got: {kind_of(name).value}"
            )
        return env.define(name, resolve(value, env))

    return Thunk(run, f"define {name}")
