"""Built-in procedures for the typelisp global environment.

Each builtin receives the evaluated operand list as one Value and returns a
Value. Structural accessors are lenient (non-cons input gives nil); the
arithmetic procedures insist on numbers and raise TypelispTypeError, which
the applier reports as `<error: wrong type>`.
"""
from __future__ import annotations

import math
from typing import Callable

from typelisp import LispValue, NativeFn
from typelisp.errors import TypelispArithmeticError, TypelispTypeError
from typelisp.types import (
    Builtin,
    Cons,
    Environment,
    Nil,
    Number,
    Symbol,
    SymbolTable,
    iter_list,
    safe_car,
    safe_cdr,
)
from typelisp.types.number import clamp, normalize


def first(args: LispValue) -> LispValue:
    return safe_car(args)


def second(args: LispValue) -> LispValue:
    return safe_car(safe_cdr(args))


# -------------------------------
# List operations
# -------------------------------
def car(args: LispValue) -> LispValue:
    """(car x) => first element of x, nil when x is not a cons."""
    return safe_car(first(args))


def cdr(args: LispValue) -> LispValue:
    """(cdr x) => rest of x, nil when x is not a cons."""
    return safe_cdr(first(args))


def cons(args: LispValue) -> LispValue:
    return Cons(first(args), second(args))


# -------------------------------
# Equality and predicates
# -------------------------------
def is_eq(args: LispValue) -> bool:
    """Numbers compare by value; everything else by identity."""
    a, b = first(args), second(args)
    if isinstance(a, Number) and isinstance(b, Number):
        return a.value == b.value
    return a is b


def is_atom(args: LispValue) -> bool:
    return not isinstance(first(args), Cons)


def is_number(args: LispValue) -> bool:
    return isinstance(first(args), Number)


def is_symbol(args: LispValue) -> bool:
    return isinstance(first(args), Symbol)


# -------------------------------
# Arithmetic
# -------------------------------
def _number(value: LispValue) -> int | float:
    if not isinstance(value, Number):
        raise TypelispTypeError()
    return value.value


def _operands(args: LispValue) -> list[int | float]:
    return [_number(arg) for arg in iter_list(args)]


def _binary_operands(args: LispValue) -> tuple[int | float, int | float]:
    # exactly the first two operands; a missing one is nil and so rejected
    return _number(first(args)), _number(second(args))


def add(args: LispValue) -> LispValue:
    """Sum of all operands; (+) => 0."""
    result = 0
    for x in _operands(args):
        result = clamp(result + x)
    return Number(result)


def mul(args: LispValue) -> LispValue:
    """Product of all operands; (*) => 1."""
    result = 1
    for x in _operands(args):
        result = clamp(result * x)
    return Number(result)


def sub(args: LispValue) -> LispValue:
    a, b = _binary_operands(args)
    return Number(a - b)


def div(args: LispValue) -> LispValue:
    """(/ a b) => a / b; integral quotients stay integers."""
    a, b = _binary_operands(args)
    if b == 0:
        raise TypelispArithmeticError("division by zero")
    return Number(normalize(a / b))


def mod(args: LispValue) -> LispValue:
    """(mod n d) => remainder of n / d, taking the sign of n."""
    n, d = _binary_operands(args)
    if d == 0:
        raise TypelispArithmeticError("division by zero")
    if isinstance(n, int) and isinstance(d, int):
        r = abs(n) % abs(d)
        return Number(-r if n < 0 else r)
    if math.isinf(n):
        return Number(math.nan)
    return Number(normalize(math.fmod(n, d)))


# -------------------------------
# Registration
# -------------------------------
PROCEDURES: dict[str, NativeFn] = {
    'car': car,
    'cdr': cdr,
    'cons': cons,
    '+': add,
    '*': mul,
    '-': sub,
    '/': div,
    'mod': mod,
}

PREDICATES: dict[str, Callable[[LispValue], bool]] = {
    'eq': is_eq,
    'atom': is_atom,
    'numberp': is_number,
    'symbolp': is_symbol,
}


def _predicate(name: str, test: Callable[[LispValue], bool], t: Symbol) -> Builtin:
    return Builtin(name, lambda args: t if test(args) else Nil)


def register(env: Environment, symbols: SymbolTable):
    """Install `t` and the builtin library into `env`."""
    t = symbols.intern('t')
    bindings = {t: t}
    for name, fn in PROCEDURES.items():
        bindings[symbols.intern(name)] = Builtin(name, fn)
    for name, test in PREDICATES.items():
        bindings[symbols.intern(name)] = _predicate(name, test, t)
    env.update(bindings)
