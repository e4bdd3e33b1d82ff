"""
  Lisp Reader

Recursive-descent reader over a plain string. Every entry point returns the
form it read together with the unconsumed remainder of the input, so a
caller can keep reading from where the previous form ended.

    - integers            -> Number (only when the text round-trips exactly)
    - nil                 -> Nil
    - anything else atomic -> Symbol, interned in the given SymbolTable
    - (a b c)             -> proper list of Cons cells
    - 'x                  -> (quote x)

Malformed input never raises: it produces an Error value and an empty
remainder. Errors met inside a list abort the whole list.
"""

from __future__ import annotations

import re
from typing import Iterator

from typelisp.types import Cons, Error, Nil, Number, SymbolTable, Value, reverse
from typelisp.types.number import MAX_INT

LPAREN = "("
RPAREN = ")"
QUOTE = "'"

ReadResult = tuple[Value, str]

# integers written the way str(int) writes them
INTEGER = re.compile(r"-?(0|[1-9][0-9]*)")
MAX_INT_DIGITS = len(str(MAX_INT))


def is_delimiter(c: str) -> bool:
    return c in (LPAREN, RPAREN, QUOTE) or c.isspace()


def skip_spaces(text: str) -> str:
    return text.lstrip()


def make_num_or_sym(token: str, symbols: SymbolTable) -> Value:
    # "007", "+5", "-0" and "1_000" do not round-trip: they are symbols
    if INTEGER.fullmatch(token) and token != "-0":
        digits = len(token.lstrip("-"))
        # float() overflows to inf where int() would build a huge integer
        return Number(int(token) if digits <= MAX_INT_DIGITS else float(token))
    if token == "nil":
        return Nil
    return symbols.intern(token)


def read_atom(text: str, symbols: SymbolTable) -> ReadResult:
    end = len(text)
    for i, c in enumerate(text):
        if is_delimiter(c):
            end = i
            break
    return make_num_or_sym(text[:end], symbols), text[end:]


def read_list(text: str, symbols: SymbolTable) -> ReadResult:
    """Read list elements up to the closing paren; `text` follows the '('."""
    acc: Value = Nil
    while True:
        text = skip_spaces(text)
        if not text:
            return Error("unfinished parenthesis"), ""
        if text[0] == RPAREN:
            break
        elem, text = read(text, symbols)
        if isinstance(elem, Error):
            return elem, ""
        acc = Cons(elem, acc)
    return reverse(acc), text[1:]


def read(text: str, symbols: SymbolTable) -> ReadResult:
    text = skip_spaces(text)
    if not text:
        return Error("empty input"), ""
    c = text[0]
    if c == RPAREN:
        return Error(f"invalid syntax: {text}"), ""
    if c == LPAREN:
        return read_list(text[1:], symbols)
    if c == QUOTE:
        elem, rest = read(text[1:], symbols)
        if isinstance(elem, Error):
            return elem, ""
        return Cons(symbols.intern("quote"), Cons(elem, Nil)), rest
    return read_atom(text, symbols)


def read_all(text: str, symbols: SymbolTable) -> Iterator[Value]:
    """Yield every top-level form in `text`; a reader error is yielded last."""
    while skip_spaces(text):
        form, text = read(text, symbols)
        yield form
        if isinstance(form, Error):
            return
