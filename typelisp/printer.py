"""Printer: render any Value as canonical text. Never fails."""

from __future__ import annotations

from io import StringIO

from typelisp.types import (
    Builtin,
    Closure,
    Cons,
    Error,
    Nil,
    NilType,
    Number,
    Symbol,
    Value,
)
from typelisp.types.number import format_number


def print_value(value: Value) -> str:
    match value:
        case NilType():
            return "nil"
        case Number(value=n):
            return format_number(n)
        case Symbol(name=name):
            return name
        case Error(message=message):
            return f"<error: {message}>"
        case Builtin():
            return "<builtin>"
        case Closure():
            return "<closure>"
        case Cons():
            return _print_list(value)
    return f"<unknown {type(value).__name__}>"


def _print_list(value: Cons) -> str:
    with StringIO() as buffer:
        buffer.write("(")
        first = True
        while isinstance(value, Cons):
            if not first:
                buffer.write(" ")
            buffer.write(print_value(value.car))
            first = False
            value = value.cdr
        if value is not Nil:
            # dotted tail
            buffer.write(" . ")
            buffer.write(print_value(value))
        buffer.write(")")
        return buffer.getvalue()
