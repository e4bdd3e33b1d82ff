"""Core evaluator for the typelisp interpreter.

`evaluate` interprets one form in an environment: self-evaluating atoms come
back unchanged, symbols are looked up, and a cons is either a special form
(recognised by the identity of its interned head symbol) or a call whose
operator and operands are evaluated before being handed to `apply`.
Recursion runs on the host stack, bounded by the context's depth limit.
"""

from __future__ import annotations

from typelisp import SExpression, LispValue
from typelisp.runtime_context import RuntimeContext
from typelisp.types import Cons, Environment, Error, Symbol, iter_list
from typelisp.evaluation.apply import apply


def evaluate(expr: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    match expr:
        case Symbol(name=name):
            binding = env.find(expr)
            if binding is None:
                return Error(f"{name} has no value")
            return binding.value

        case Cons(car=head, cdr=operands):
            if ctx.depth >= ctx.max_depth:
                return Error("stack overflow")
            ctx.depth += 1
            try:
                if isinstance(head, Symbol):
                    special_form = ctx.special_forms.get(head)
                    if special_form is not None:
                        return special_form(operands, env, ctx)
                fn = evaluate(head, env, ctx)
                args = evlis(operands, env, ctx)
                return apply(fn, args, ctx)
            finally:
                ctx.depth -= 1

    # --- nil, numbers, errors, builtins and closures evaluate to themselves ---
    return expr


def evlis(operands: SExpression, env: Environment, ctx: RuntimeContext) -> LispValue:
    """Evaluate operands left to right; the first Error is returned as is."""
    values = []
    for operand in iter_list(operands):
        value = evaluate(operand, env, ctx)
        if isinstance(value, Error):
            return value
        values.append(value)
    return Cons.from_iterable(values)
