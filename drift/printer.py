"""Textual forms of drift values.

`format_value` writes a value so that numbers and strings read back as the
same literal; `display` is the form `print` uses, with strings unquoted.
"""

from __future__ import annotations

from drift import LispValue
from drift.types.lambda_fn import Closure
from drift.types.nil import NilType
from drift.types.value import Thunk


def format_value(value: LispValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        # prefer a quote character that does not occur in the text
        quote = "'" if '"' in value and "'" not in value else '"'
        return f"{quote}{value}{quote}"
    if isinstance(value, list):
        return "(" + " ".join(format_value(v) for v in value) + ")"
    return _atom(value)


def display(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "(" + " ".join(display(v) for v in value) + ")"
    return format_value(value)


def _atom(value: LispValue) -> str:
    if isinstance(value, NilType):
        return "null"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (Closure, Thunk)):
        return repr(value)
    if callable(value):
        name = getattr(value, '__name__', 'function').removesuffix('_builtin')
        return f"<builtin {name}>"
    return str(value)
