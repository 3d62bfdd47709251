from drift import Element, LispValue
from drift.errors import DriftArityError
from drift.types.environment import Environment
from drift.types.value import Thunk, resolve


def begin_form(elements: list[Element], _: list[str]) -> Thunk:
    if not elements:
        raise DriftArityError("begin requires at least 1 expression")

    def run(env: Environment) -> LispValue:
        for element in elements[:-1]:
            resolve(element, env)
        return resolve(elements[-1], env)

    return Thunk(run, "begin")
