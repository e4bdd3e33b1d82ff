from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TYPE_CHECKING

from typelisp.types import Environment, Symbol, SymbolTable

if TYPE_CHECKING:
    from typelisp.types import Value

# (operands, env, ctx) -> Value
SpecialForm = Callable[["Value", Environment, "RuntimeContext"], "Value"]


@dataclass
class RuntimeContext:
    """Session-wide state threaded through eval/apply.

    Holds the session's own symbol table and global environment, so two
    sessions never share interned symbols or definitions.
    """
    symbols: SymbolTable
    global_env: Environment
    special_forms: dict[Symbol, SpecialForm] = field(default_factory=dict)
    max_depth: int = 2500
    depth: int = 0
