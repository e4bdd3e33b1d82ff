from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

from typelisp import SExpression, LispValue
from typelisp.builtins import register
from typelisp.config import get_max_depth
from typelisp.evaluation.evaluator import evaluate
from typelisp.evaluation.special_forms import special_forms_for
from typelisp.printer import print_value
from typelisp.reader.parser import read, read_all
from typelisp.runtime_context import RuntimeContext
from typelisp.types import Environment, Error, Nil, SymbolTable

logger = logging.getLogger(__name__)

# Host frames per evaluation level (evaluate -> apply -> progn) plus slack
FRAMES_PER_LEVEL = 4
RECURSION_HEADROOM = 1000
MAX_RECURSION_LIMIT = 15000


def ensure_recursion_limit(max_depth: int) -> None:
    """Raise the host recursion limit so `max_depth` levels fit; never lower it."""
    wanted = min(max_depth * FRAMES_PER_LEVEL + RECURSION_HEADROOM, MAX_RECURSION_LIMIT)
    if sys.getrecursionlimit() < wanted:
        logger.debug("raising recursion limit to %d", wanted)
        sys.setrecursionlimit(wanted)


class Interpreter:
    """
    One read-eval-print session.

    Owns its own SymbolTable and global Environment, so separate sessions
    never see each other's symbols or definitions. Reading, evaluation and
    printing never raise for Lisp-level problems; they return Error values.
    Host stack exhaustion in any of them becomes `<error: stack overflow>`.
    """

    def __init__(
        self,
        prelude: str | None = None,
        *,
        symbols: SymbolTable | None = None,
        max_depth: int | None = None,
    ):
        self.symbols: SymbolTable = symbols if symbols is not None else SymbolTable()
        self.env: Environment = Environment()
        register(self.env, self.symbols)

        self.context = RuntimeContext(
            symbols=self.symbols,
            global_env=self.env,
            special_forms=special_forms_for(self.symbols),
            max_depth=max_depth if max_depth is not None else get_max_depth(),
        )
        ensure_recursion_limit(self.context.max_depth)

        if prelude:
            self.eval_prelude(prelude)

    def read(self, code: str) -> SExpression:
        """Read the first form of `code`."""
        try:
            form, _ = read(code, self.symbols)
        except RecursionError:
            logger.warning("host stack exhausted while reading")
            return Error("stack overflow")
        return form

    def read_forms(self, code: str) -> Iterator[SExpression]:
        """Yield every form of `code`; a reader error is yielded last."""
        try:
            yield from read_all(code, self.symbols)
        except RecursionError:
            logger.warning("host stack exhausted while reading")
            yield Error("stack overflow")

    def evaluate(self, form: SExpression) -> LispValue:
        """Evaluate an already-read form in the global environment."""
        try:
            return evaluate(form, self.env, self.context)
        except RecursionError:
            logger.warning("host stack exhausted during evaluation (max_depth %d)", self.context.max_depth)
            return Error("stack overflow")
        finally:
            self.context.depth = 0

    def print(self, value: LispValue) -> str:
        try:
            return print_value(value)
        except RecursionError:
            logger.warning("host stack exhausted while printing")
            return print_value(Error("stack overflow"))

    def eval(self, code: str) -> LispValue:
        """Read and evaluate one top-level form; the rest of `code` is ignored."""
        form = self.read(code)
        if isinstance(form, Error):
            return form
        return self.evaluate(form)

    def rep(self, line: str) -> str:
        """print(eval(read(line))) for one input line."""
        return self.print(self.eval(line.rstrip("\r\n")))

    def eval_prelude(self, code: str) -> LispValue:
        """Evaluate every form in `code`, returning the last value.

        A reader error stops the load and is returned.
        """
        result: LispValue = Nil
        for form in self.read_forms(code):
            if isinstance(form, Error):
                return form
            result = self.evaluate(form)
        return result

    def load(self, path: str | Path) -> LispValue:
        p = Path(path)
        logger.debug("loading %s", p)
        return self.eval_prelude(p.read_text(encoding="utf-8"))
