from __future__ import annotations

"""
Lightweight indexer for typelisp documents, without evaluating code.

We scan for top-level forms and build an index for:
- definitions: (defun name ...) and (setq name ...)
- paren balance, for a quick unmatched-paren warning
and separately run the real reader over the text to locate syntax errors.

The scanner is tolerant: it never fails on partial/incomplete buffers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import re

from typelisp.reader.parser import read, skip_spaces
from typelisp.types import Error, SymbolTable

TOKEN_REGEX = re.compile(r"\s+|\(|\)|'|[^\s()']+")

DEFINING_FORMS = {"defun": "function", "setq": "var"}


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if tok.isspace():
            continue
        yield tok, m.start()


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, _) in enumerate(tokens):
        if tok == ')':
            idx.paren_balance -= 1
            continue
        if tok != '(':
            continue
        idx.paren_balance += 1
        # (defun name ...) / (setq name ...): name must be a plain atom
        if i + 2 >= len(tokens):
            continue
        head, _ = tokens[i + 1]
        name, start = tokens[i + 2]
        kind = DEFINING_FORMS.get(head)
        if kind is None or name in ("(", ")", "'"):
            continue
        line, col = position_from_offset(text, start)
        # first definition wins for navigation purposes
        idx.symbols.setdefault(name, SymbolDef(name=name, kind=kind, line=line, col=col))
    return idx


def check_syntax(text: str, symbols: Optional[SymbolTable] = None) -> List[SyntaxProblem]:
    """Read `text` form by form and report the first reader error, if any."""
    symbols = symbols if symbols is not None else SymbolTable()
    rest = text
    while True:
        rest = skip_spaces(rest)
        if not rest:
            return []
        start = len(text) - len(rest)
        try:
            form, rest = read(rest, symbols)
        except RecursionError:
            form = Error("stack overflow")
        if isinstance(form, Error):
            line, col = position_from_offset(text, start)
            message = form.message.splitlines()[0] if form.message else form.message
            return [SyntaxProblem(message=message, line=line, col=col)]


# --- Text helpers shared by hover/completion/signature help ---

def line_prefix(text: str, line: int, character: int) -> str:
    # Return the text from start of line up to the cursor
    lines = text.splitlines(True)
    if line >= len(lines):
        return ""
    return lines[line][:character]


def word_at(text: str, line: int, character: int) -> Tuple[Optional[str], int]:
    """The atom under the cursor and the column it starts at."""
    lines = text.splitlines(True)
    if line >= len(lines):
        return None, character
    current = lines[line]
    start = character
    while start > 0 and current[start - 1] not in " \t()'\n\r":
        start -= 1
    end = character
    while end < len(current) and current[end] not in " \t()'\n\r":
        end += 1
    word = current[start:end]
    return (word if word else None), start


def callee_name(prefix: str) -> Optional[str]:
    # find last '(' and take following token
    lp = prefix.rfind('(')
    if lp == -1:
        return None
    tail = prefix[lp + 1:].lstrip()
    if not tail:
        return None
    m = re.match(r"[^\s()']+", tail)
    return m.group(0) if m else None


# Builtin and special-form signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "car": "(car x)",
    "cdr": "(cdr x)",
    "cons": "(cons a b)",
    "eq": "(eq a b)",
    "atom": "(atom x)",
    "numberp": "(numberp x)",
    "symbolp": "(symbolp x)",
    "+": "(+ &rest nums)",
    "*": "(* &rest nums)",
    "-": "(- a b)",
    "/": "(/ a b)",
    "mod": "(mod n d)",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote form)",
    "if": "(if test then else)",
    "lambda": "(lambda params &body body)",
    "defun": "(defun name params &body body)",
    "setq": "(setq name value)",
}


def signature_of(name: str) -> Optional[str]:
    return BUILTIN_SIGNATURES.get(name) or SPECIAL_FORM_SIGNATURES.get(name)


def signature_params(sig: str) -> List[str]:
    """Parameter labels of a signature string, e.g. '(mod n d)' -> ['n', 'd']."""
    inner = sig.strip()[1:-1].split()
    return inner[1:]
