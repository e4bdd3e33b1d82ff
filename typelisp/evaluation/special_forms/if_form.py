from typelisp import SExpression, LispValue
from typelisp.evaluation.evaluator import evaluate
from typelisp.runtime_context import RuntimeContext
from typelisp.types import Environment, Error, Nil, safe_car, safe_cdr


def if_form(operands: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    """(if test then [else]) - only the chosen branch is evaluated."""
    cond = evaluate(safe_car(operands), env, ctx)
    if isinstance(cond, Error):
        return cond

    branches = safe_cdr(operands)
    if cond is Nil:
        # a missing else branch reads as nil, which evaluates to nil
        return evaluate(safe_car(safe_cdr(branches)), env, ctx)
    return evaluate(safe_car(branches), env, ctx)
