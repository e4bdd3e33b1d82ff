"""Cons cells and the list helpers built on them.

Lists are chains of Cons cells ending in Nil (proper) or in any other value
(dotted). Construction is always fresh: nothing in the interpreter rewrites
the car or cdr of an existing cell, so a list can be shared freely once built.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TYPE_CHECKING

from typelisp.types.nil import Nil

if TYPE_CHECKING:
    from typelisp.types import Value


class Cons:
    __slots__ = ("car", "cdr")
    __match_args__ = ("car", "cdr")

    def __init__(self, car: Value, cdr: Value = Nil):
        self.car = car
        self.cdr = cdr

    @classmethod
    def from_iterable(cls, items: Iterable[Value], tail: Value = Nil) -> Value:
        """Build a list from `items`, terminated by `tail` (Nil for a proper list)."""
        result = tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __iter__(self) -> Iterator[Value]:
        """Iterate over the elements of the proper part of the list."""
        return iter_list(self)

    def __eq__(self, other: object) -> bool:
        # structural; Lisp `eq` compares cells by identity instead
        if not isinstance(other, Cons):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a == b

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from typelisp.printer import print_value
        return f"Cons{print_value(self)}"


def safe_car(value: Value) -> Value:
    return value.car if isinstance(value, Cons) else Nil


def safe_cdr(value: Value) -> Value:
    return value.cdr if isinstance(value, Cons) else Nil


def iter_list(value: Value) -> Iterator[Value]:
    while isinstance(value, Cons):
        yield value.car
        value = value.cdr


def reverse(value: Value) -> Value:
    """Return a new list with the elements of `value` in reverse order."""
    result: Value = Nil
    for item in iter_list(value):
        result = Cons(item, result)
    return result
