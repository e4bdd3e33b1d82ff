"""Runtime environment for typelisp.

An Environment is one frame of bindings plus an `outer` link to the frame it
extends; the global environment is the frame whose `outer` is None. Each
binding is a mutable cell so that `setq` updates are seen by every frame
that reaches it.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from typelisp.errors import TypelispTypeError
from typelisp.types.symbol import Symbol

if TYPE_CHECKING:
    from typelisp.types import Value


class Binding:
    """The (symbol . value) cell of one frame."""

    __slots__ = ("symbol", "value")

    def __init__(self, symbol: Symbol, value: Value):
        self.symbol = symbol
        self.value = value

    def __repr__(self) -> str:
        return f"Binding({self.symbol.name!r}, {self.value!r})"


class Environment:
    """Chain of frames mapping Symbols to Bindings, searched innermost first."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Binding] = {}
        self.outer: Environment | None = outer

    @property
    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def define(self, name: Symbol, value: Value) -> Binding:
        """Bind `name` to `value` in this frame.

        A new cell is created; an earlier binding of `name` in this frame is
        shadowed rather than updated, so holders of the old cell keep it.
        Raises TypelispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise TypelispTypeError()
        binding = Binding(name, value)
        self.vars[name] = binding
        return binding

    def binding(self, name: Symbol) -> Optional[Binding]:
        """The binding of `name` in this frame only."""
        return self.vars.get(name)

    def find(self, name: Symbol) -> Optional[Binding]:
        """Find the nearest binding of `name` in the chain, or None."""
        env: Optional[Environment] = self
        while env is not None:
            binding = env.vars.get(name)
            if binding is not None:
                return binding
            env = env.outer
        return None

    def assign(self, name: Symbol, value: Value) -> Binding:
        """setq: update the visible binding in place, else define globally."""
        if not isinstance(name, Symbol):
            raise TypelispTypeError()
        binding = self.find(name)
        if binding is None:
            return self.root.define(name, value)
        binding.value = value
        return binding

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.define(k, v)
