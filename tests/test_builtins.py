import pytest

from typelisp import builtins
from typelisp.errors import TypelispArithmeticError, TypelispTypeError
from typelisp.types import Cons, Nil, Number


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(+)", "0"),
        ("(* )", "1"),
        ("(* 2 3 4)", "24"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(- 5 2)", "3"),
        ("(- 2 5)", "-3"),
        ("(- 5 2 100)", "3"),
        ("(/ 12 3)", "4"),
        ("(/ 7 2)", "3.5"),
        ("(+ (/ 1 2) (/ 1 2))", "1"),
        ("(mod 7 3)", "1"),
        ("(mod -7 2)", "-1"),
        ("(mod 7 -2)", "1"),
        ("(mod (/ 7 2) 2)", "1.5"),
        ("(- 5)", "<error: wrong type>"),
        ("(-)", "<error: wrong type>"),
        ("(/ 1)", "<error: wrong type>"),
        ("(+ 1 'a)", "<error: wrong type>"),
        ("(* 'a 1)", "<error: wrong type>"),
        ("(- 'a 1)", "<error: wrong type>"),
        ("(+ 1 nil)", "<error: wrong type>"),
        ("(/ 1 0)", "<error: division by zero>"),
        ("(mod 1 0)", "<error: division by zero>"),
    ],
)
def test_arithmetic(rep, source, expected):
    assert rep(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(car '(a b))", "a"),
        ("(cdr '(a b))", "(b)"),
        ("(cdr '(a))", "nil"),
        ("(car nil)", "nil"),
        ("(car 'a)", "nil"),
        ("(cdr 5)", "nil"),
        ("(car)", "nil"),
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(cons 1 nil)", "(1)"),
        ("(cons 1)", "(1)"),
        ("(car (cons 'x 'y))", "x"),
        ("(cdr (cons 'x 'y))", "y"),
    ],
)
def test_list_operations(rep, source, expected):
    assert rep(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(eq 'a 'a)", "t"),
        ("(eq 'a 'b)", "nil"),
        ("(eq 1 1)", "t"),
        ("(eq (/ 4 2) 2)", "t"),
        ("(eq 1 2)", "nil"),
        ("(eq 1 'a)", "nil"),
        ("(eq nil nil)", "t"),
        ("(eq nil '())", "t"),
        ("(eq '(1) '(1))", "nil"),
        ("(eq car car)", "t"),
        ("(atom 'a)", "t"),
        ("(atom 1)", "t"),
        ("(atom nil)", "t"),
        ("(atom '(1))", "nil"),
        ("(numberp 3)", "t"),
        ("(numberp 'a)", "nil"),
        ("(symbolp 'a)", "t"),
        ("(symbolp 3)", "nil"),
        ("(symbolp '(a))", "nil"),
    ],
)
def test_predicates(rep, source, expected):
    assert rep(source) == expected


def test_eq_on_the_same_cons(rep):
    rep("(setq xs '(1 2))")
    assert rep("(eq xs xs)") == "t"


def test_t_is_bound_to_itself(interp):
    t = interp.symbols.intern("t")
    assert interp.env.find(t).value is t


def test_builtins_raise_host_errors():
    with pytest.raises(TypelispTypeError):
        builtins.add(Cons.from_iterable([Number(1), Nil]))
    with pytest.raises(TypelispArithmeticError):
        builtins.div(Cons.from_iterable([Number(1), Number(0)]))


def test_register_installs_every_builtin(interp):
    for name in [*builtins.PROCEDURES, *builtins.PREDICATES]:
        assert interp.env.find(interp.symbols.intern(name)) is not None


def _square_repeatedly(rep, times):
    rep("(setq x 10)")
    for _ in range(times):
        rep("(setq x (* x x))")


def test_products_beyond_double_range_become_infinite(rep):
    _square_repeatedly(rep, 13)
    assert rep("x") == "inf"
    assert rep("(numberp x)") == "t"
    assert rep("(- 0 x)") == "-inf"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(/ x 1)", "inf"),
        ("(/ 1 x)", "0"),
        ("(/ x x)", "nan"),
        ("(mod x 7)", "nan"),
        ("(mod 7 x)", "7"),
        ("(+ x (- 0 x))", "nan"),
    ],
)
def test_arithmetic_on_infinity_never_raises(rep, source, expected):
    _square_repeatedly(rep, 9)
    assert rep(source) == expected


def test_large_integers_inside_double_range_stay_exact(rep):
    _square_repeatedly(rep, 8)
    assert rep("x") == str(10**256)
    assert rep("(numberp (/ x 1))") == "t"
    assert rep("(mod x 7)") == str(10**256 % 7)


def test_sums_past_double_range_mix_with_floats(rep):
    _square_repeatedly(rep, 8)
    rep(f"(setq a (* x {10**52}))")
    assert rep("a") == str(10**308)
    assert rep("(+ a a a (/ 1 2))") == "inf"
