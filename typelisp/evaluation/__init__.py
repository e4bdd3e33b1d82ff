from typelisp.evaluation.evaluator import evaluate, evlis
from typelisp.evaluation.apply import apply, progn

__all__ = ["evaluate", "evlis", "apply", "progn"]
