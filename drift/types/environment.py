"""Runtime environment for drift.

An Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Lambda calls create a child scope of the
closure's captured environment; the chain is walked outward on lookup.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from drift import LispValue
from drift.errors import DriftInvalidSymbol, DriftNameError, DriftUnboundSymbol


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this scope and return `value`.

        Raises DriftInvalidSymbol if `name` is not a string and DriftNameError
        if this scope already binds `name`. Outer scopes are not consulted, so
        a child scope may define a name its parent also binds.
        """
        if not isinstance(name, str):
            raise DriftInvalidSymbol(f"Cannot define {name!r} as a name")
        if name in self.vars:
            raise DriftNameError(f"{name} was already defined")
        self.vars[name] = value
        return value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: str, value: LispValue) -> LispValue:
        """Overwrite the nearest existing binding for `name` and return `value`.

        Raises DriftUnboundSymbol if no scope in the chain binds `name`.
        """
        if not isinstance(name, str):
            raise DriftInvalidSymbol(f"Cannot set {name!r}, it is not a name")
        env = self.find(name)
        if env is None:
            raise DriftUnboundSymbol(f"set used on a name that hasn't been defined: {name}")
        env.vars[name] = value
        return value

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`, walking outward through the chain.

        Raises DriftUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise DriftUnboundSymbol(f"Cannot lookup unbound name {name}")
        return env.vars[name]

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-bind a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            if not isinstance(k, str):
                raise DriftInvalidSymbol(f"Cannot define {k!r} as a name")
            self.vars[k] = v

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
