# Core type aliases for the typelisp data model.
# Every runtime object is one of the classes in `typelisp.types`; see `Value`
# there for the closed union. The aliases below exist so annotations in the
# reader, evaluator and builtins read the same way throughout the package.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote unevaluated forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to the same union; forms and values share one representation.

from typing import Callable

from typelisp.types import Value

LispValue = Value
SExpression = Value

# Native procedure wrapped by a Builtin: receives the evaluated argument list
NativeFn = Callable[[Value], Value]

__version__ = "0.1.0"
