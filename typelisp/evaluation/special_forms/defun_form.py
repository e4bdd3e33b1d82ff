import logging

from typelisp import SExpression, LispValue
from typelisp.runtime_context import RuntimeContext
from typelisp.types import Closure, Environment, Error, Symbol, safe_car, safe_cdr

logger = logging.getLogger(__name__)


def defun_form(operands: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    """
    (defun name (params) body...)
    The closure captures the current environment but the name is always bound
    in the global environment. Returns the name.
    """
    name = safe_car(operands)
    if not isinstance(name, Symbol):
        return Error("wrong type")
    rest = safe_cdr(operands)
    ctx.global_env.define(name, Closure(safe_car(rest), safe_cdr(rest), env))
    logger.debug("defun %s", name.name)
    return name
