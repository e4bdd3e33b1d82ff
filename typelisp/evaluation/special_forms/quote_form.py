from typelisp import SExpression, LispValue
from typelisp.runtime_context import RuntimeContext
from typelisp.types import Environment, safe_car


def quote_form(operands: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    return safe_car(operands)
