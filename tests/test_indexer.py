import pytest

from typelisp_lsp.indexer import (
    SymbolDef,
    SyntaxProblem,
    build_index,
    callee_name,
    check_syntax,
    line_prefix,
    position_from_offset,
    signature_of,
    signature_params,
    word_at,
)

DOC = """(defun double (x) (+ x x))
(setq limit 10)
(double limit)
"""


def test_build_index_finds_definitions():
    idx = build_index(DOC)
    assert idx.symbols == {
        "double": SymbolDef(name="double", kind="function", line=0, col=7),
        "limit": SymbolDef(name="limit", kind="var", line=1, col=6),
    }
    assert idx.paren_balance == 0


def test_build_index_tolerates_partial_buffers():
    idx = build_index("(defun f (x)\n  (+ x")
    assert "f" in idx.symbols
    assert idx.paren_balance == 2
    assert build_index("(setq").symbols == {}
    assert build_index("(setq (a) 1)").symbols == {}


def test_first_definition_wins():
    idx = build_index("(setq a 1)\n(setq a 2)")
    assert idx.symbols["a"].line == 0


def test_check_syntax_clean_document():
    assert check_syntax(DOC) == []
    assert check_syntax("") == []


@pytest.mark.parametrize(
    "text, problem",
    [
        ("(defun f (x) x)\n(f", SyntaxProblem("unfinished parenthesis", 1, 0)),
        ("a\n  )\nb", SyntaxProblem("invalid syntax: )", 1, 2)),
        ("(a '", SyntaxProblem("empty input", 0, 0)),
        ("1 2 '", SyntaxProblem("empty input", 0, 4)),
    ],
)
def test_check_syntax_reports_first_reader_error(text, problem):
    assert check_syntax(text) == [problem]


def test_check_syntax_reports_too_deep_nesting():
    assert check_syntax("a\n" + "(" * 10000) == [SyntaxProblem("stack overflow", 1, 0)]


def test_position_from_offset():
    assert position_from_offset("ab\ncd", 0) == (0, 0)
    assert position_from_offset("ab\ncd", 4) == (1, 1)


def test_text_helpers():
    text = "(double (car xs))\n"
    assert word_at(text, 0, 3) == ("double", 1)
    assert word_at(text, 0, 10) == ("car", 9)
    assert word_at(text, 5, 0) == (None, 0)
    assert line_prefix(text, 0, 12) == "(double (car"
    assert callee_name("(double (car x") == "car"
    assert callee_name("double") is None
    assert callee_name("(") is None


def test_signatures():
    assert signature_of("mod") == "(mod n d)"
    assert signature_of("setq") == "(setq name value)"
    assert signature_of("unknown") is None
    assert signature_params("(mod n d)") == ["n", "d"]
    assert signature_params("(+ &rest nums)") == ["&rest", "nums"]
