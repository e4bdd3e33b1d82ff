from typelisp import SExpression, LispValue
from typelisp.runtime_context import RuntimeContext
from typelisp.types import Closure, Environment, safe_car, safe_cdr


def lambda_form(operands: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    # (lambda (params) body...) closes over the environment it is evaluated in.
    # The body is an implicit progn; with no body forms a call returns nil.
    return Closure(safe_car(operands), safe_cdr(operands), env)
