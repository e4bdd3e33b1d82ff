"""Closure representation and call-frame construction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from typelisp.errors import TypelispTypeError
from typelisp.types.cons import iter_list
from typelisp.types.environment import Environment
from typelisp.types.symbol import Symbol

if TYPE_CHECKING:
    from typelisp.types import Value


class Closure:
    """A lambda: parameter list, body forms and the environment it closed over."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: Value, body: Value, env: Environment):
        self.params = params
        self.body = body
        self.env = env

    def __repr__(self) -> str:
        return "<closure>"

    def extend_env(self, args: Value) -> Environment:
        """
        Pair parameters with argument values in a new frame on top of the
        captured environment. Surplus parameters or arguments are dropped;
        for a repeated parameter name the first pairing wins.
        """
        frame = Environment(outer=self.env)
        for param, arg in zip(iter_list(self.params), iter_list(args)):
            if not isinstance(param, Symbol):
                raise TypelispTypeError()
            if frame.binding(param) is None:
                frame.define(param, arg)
        return frame
