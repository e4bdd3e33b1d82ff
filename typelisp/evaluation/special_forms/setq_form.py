from typelisp import SExpression, LispValue
from typelisp.evaluation.evaluator import evaluate
from typelisp.runtime_context import RuntimeContext
from typelisp.types import Environment, Error, Symbol, safe_car, safe_cdr


def setq_form(operands: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    """
    (setq name value)
    Updates the innermost visible binding of `name` in place; an unbound name
    is defined in the global environment.
    """
    name = safe_car(operands)
    value = evaluate(safe_car(safe_cdr(operands)), env, ctx)
    if isinstance(value, Error):
        return value
    if not isinstance(name, Symbol):
        return Error("wrong type")
    env.assign(name, value)
    return value
