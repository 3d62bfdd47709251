from drift import Element, LispValue
from drift.errors import DriftArityError
from drift.types.environment import Environment
from drift.types.lambda_fn import Closure
from drift.types.value import Thunk


def lambda_form(elements: list[Element], parameters: list[str]) -> Thunk:
    """
    (lambda (params...) body...)
    Evaluates to a Closure over the environment the form runs in. When there
    are several body forms they run in order and the last gives the result.
    """
    if not elements:
        raise DriftArityError("Lambda requires at least 1 expression")

    body = list(elements)

    def run(env: Environment) -> LispValue:
        return Closure(list(parameters), body, env)

    return Thunk(run, f"lambda ({' '.join(parameters)})")
