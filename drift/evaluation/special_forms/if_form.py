from drift import Element, LispValue
from drift.errors import DriftArityError
from drift.types.environment import Environment
from drift.types.value import Thunk, invoke, is_function, is_truthy, resolve


def if_form(elements: list[Element], _: list[str]) -> Thunk:
    """
    (if condition then else)
    Only the selected branch is evaluated.
    """
    if len(elements) != 3:
        raise DriftArityError(f"if expects 3 arguments, but got {len(elements)}")

    condition, then_branch, else_branch = elements

    def run(env: Environment) -> LispValue:
        test = resolve(condition, env)
        if is_function(test):
            test = invoke(test, env)
        return resolve(then_branch if is_truthy(test) else else_branch, env)

    return Thunk(run, "if")
