"""Application engine for typelisp.

Invokes a builtin or a closure on an already-evaluated argument list.
Builtins may raise a TypelispError; it is turned into an Error value here so
that errors stay ordinary data everywhere above this point.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from typelisp.errors import TypelispError
from typelisp.types import Builtin, Closure, Environment, Error, Nil, iter_list

if TYPE_CHECKING:
    from typelisp import LispValue, SExpression
    from typelisp.runtime_context import RuntimeContext

logger = logging.getLogger(__name__)


def progn(body: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    # only the last form's value is kept
    from typelisp.evaluation.evaluator import evaluate
    result: LispValue = Nil
    for form in iter_list(body):
        result = evaluate(form, env, ctx)
    return result


def apply(fn: LispValue, args: LispValue, ctx: RuntimeContext) -> LispValue:
    if isinstance(fn, Error):
        return fn
    if isinstance(args, Error):
        return args

    match fn:
        case Builtin():
            try:
                return fn(args)
            except TypelispError as exc:
                logger.debug("builtin %s failed: %s", fn.name, exc)
                return Error(str(exc))
        case Closure():
            try:
                frame = fn.extend_env(args)
            except TypelispError as exc:
                return Error(str(exc))
            return progn(fn.body, frame, ctx)
        case _:
            return Error("noimpl")
