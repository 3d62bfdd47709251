"""Registry of special forms for the drift compiler.

Maps keyword text to the builder that compiles the form's elements into a
Thunk, together with how the compiler must read the form's elements:
how many leading elements are binding positions (compiled to raw names),
whether a parameter list comes first, and which token may optionally
follow the keyword.
"""

from dataclasses import dataclass
from typing import Callable

from drift import Element
from drift.reader.tokens import TokenKind
from drift.types.value import Thunk
from drift.evaluation.special_forms.if_form import if_form
from drift.evaluation.special_forms.define_form import define_form
from drift.evaluation.special_forms.set_form import set_form
from drift.evaluation.special_forms.lambda_form import lambda_form
from drift.evaluation.special_forms.begin_form import begin_form
from drift.evaluation.special_forms.list_form import list_form
from drift.evaluation.special_forms.arith_forms import ARITH_FORMS


@dataclass(frozen=True)
class SpecialForm:
    build: Callable[[list[Element], list[str]], Thunk]
    binding_positions: int = 0
    takes_parameters: bool = False
    optional_prefix: TokenKind | None = None


SPECIAL_FORMS = {
    "if": SpecialForm(if_form),
    "define": SpecialForm(define_form, binding_positions=1),
    "set": SpecialForm(set_form, binding_positions=1, optional_prefix=TokenKind.NOT),
    "lambda": SpecialForm(lambda_form, takes_parameters=True),
    "begin": SpecialForm(begin_form),
    "list": SpecialForm(list_form),
}

__all__ = ["ARITH_FORMS", "SPECIAL_FORMS", "SpecialForm"]
