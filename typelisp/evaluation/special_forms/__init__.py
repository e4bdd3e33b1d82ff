"""Registry of special forms for the typelisp evaluator.

Special forms are keyed by name here and interned per session by
`special_forms_for`, so the evaluator recognises them by symbol identity.
"""

from typelisp.runtime_context import SpecialForm
from typelisp.types import Symbol, SymbolTable
from typelisp.evaluation.special_forms.quote_form import quote_form
from typelisp.evaluation.special_forms.if_form import if_form
from typelisp.evaluation.special_forms.lambda_form import lambda_form
from typelisp.evaluation.special_forms.defun_form import defun_form
from typelisp.evaluation.special_forms.setq_form import setq_form

SPECIAL_FORMS: dict[str, SpecialForm] = {
    "quote": quote_form,
    "if": if_form,
    "lambda": lambda_form,
    "defun": defun_form,
    "setq": setq_form,
}


def special_forms_for(symbols: SymbolTable) -> dict[Symbol, SpecialForm]:
    return {symbols.intern(name): handler for name, handler in SPECIAL_FORMS.items()}
