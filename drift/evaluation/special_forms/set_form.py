from drift import Element, LispValue
from drift.errors import DriftArityError, DriftInvalidSymbol, DriftUnboundSymbol
from drift.types.environment import Environment
from drift.types.value import Thunk, kind_of, resolve


def set_form(elements: list[Element], _: list[str]) -> Thunk:
    """
    (set name value) or (set! name value)
    Overwrites the nearest existing binding of name and returns the new value.
    """
    if len(elements) != 2:
        raise DriftArityError(f"set expects 2 arguments, but got {len(elements)}")

    name, value = elements

    def run(env: Environment) -> LispValue:
        if not isinstance(name, str):
            raise DriftInvalidSymbol(
                f"set expects an identifier as its first arg but got: {kind_of(name).value}"
            )
        # the binding must exist before the value is computed
        if env.find(name) is None:
            raise DriftUnboundSymbol(f"set being used on identifier that hasn't been defined: {name}")
        return env.set(name, resolve(value, env))

    return Thunk(run, f"set {name}")
