from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from typelisp.types import Value


@dataclass(frozen=True, slots=True, eq=False)
class Builtin:
    """A native procedure taking the evaluated argument list as one Value."""
    name: str
    fn: Callable[[Value], Value]

    def __call__(self, args: Value) -> Value:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
