from drift import Element, LispValue
from drift.types.environment import Environment
from drift.types.value import Thunk, resolve


def list_form(elements: list[Element], _: list[str]) -> Thunk:
    def run(env: Environment) -> LispValue:
        return [resolve(element, env) for element in elements]

    return Thunk(run, "list")
