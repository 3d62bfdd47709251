"""Closure representation and argument binding for drift lambdas."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Sequence

from drift import Element, LispValue
from drift.types.environment import Environment
from drift.types.value import resolve

logger = logging.getLogger(__name__)


class Closure:
    """A first-class lambda with parameter names, body elements, and captured env."""

    __slots__ = ("parameters", "body", "env")

    def __init__(self, parameters: list[str], body: list[Element], env: Environment):
        self.parameters: list[str] = parameters
        self.body: list[Element] = body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<lambda (")
            buffer.write(" ".join(self.parameters))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: Sequence[LispValue]) -> Environment:
        """Bind argument values to the parameters in a fresh child of the captured env.

        A count mismatch is reported but not fatal: missing parameters stay
        unbound and surplus arguments are dropped.
        """
        if len(args) != len(self.parameters):
            logger.warning(
                "Number of arguments passed to lambda does not match what it was "
                "specified with: %d vs %d", len(args), len(self.parameters),
            )
        scope = Environment(self.env)
        scope.update(dict(zip(self.parameters, args)))
        return scope

    def __call__(self, caller_env: Environment, args: Sequence[LispValue]) -> LispValue:
        # caller_env is unused: the body runs in a child of the captured scope
        scope = self.extend_env(args)
        for element in self.body[:-1]:
            resolve(element, scope)
        return resolve(self.body[-1], scope)
