# Core type aliases for drift's data model.
# Runtime values are plain Python objects (int, float, str, bool, list) plus
# the Nil singleton for null and callables for functions. No wrapper Value
# class is defined; `drift.types.value.kind_of` names the kind of any value.
#
# Naming guidance:
# - LispValue: an evaluated runtime value.
# - Element:   a compiled sub-expression, either a raw literal value or a Thunk
#              that produces a value when invoked against an environment.

from typing import Any

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Compiled sub-expression: a literal LispValue or a drift.types.value.Thunk
Element = Any
