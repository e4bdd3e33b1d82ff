"""Value Model, Symbol Table and Environment.

`Value` is the closed union of every runtime object:
nil, number, symbol, cons, error, builtin and closure.
"""

from typing import Union

from typelisp.types.nil import Nil, NilType
from typelisp.types.number import Number
from typelisp.types.symbol import Symbol, SymbolTable
from typelisp.types.cons import Cons, safe_car, safe_cdr, iter_list, reverse
from typelisp.types.error import Error
from typelisp.types.builtin_fn import Builtin
from typelisp.types.environment import Binding, Environment
from typelisp.types.lambda_fn import Closure

Value = Union[NilType, Number, Symbol, Cons, Error, Builtin, Closure]

__all__ = [
    "Value",
    "Nil",
    "NilType",
    "Number",
    "Symbol",
    "SymbolTable",
    "Cons",
    "safe_car",
    "safe_cdr",
    "iter_list",
    "reverse",
    "Error",
    "Builtin",
    "Binding",
    "Environment",
    "Closure",
]
