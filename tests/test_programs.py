import pytest

from jam.errors import JamIllegalForwardReference, JamTypeError
from jam.interpreter import Interpreter

# Y combinator that is safe under call-by-value: the self-application is
# wrapped in a function so it is not evaluated until called.
VALUE_Y = "map f to let g := map x to f(map z to (x(x))(z)); in g(g)"
# Y combinator for call-by-name and call-by-need only.
LAZY_Y = "map f to let g := map x to f(x(x)); in g(g)"

APPEND = """
let Y      := map f to
                let g := map x to f(map z1,z2 to (x(x))(z1,z2));
                in g(g);
    APPEND := map ap to
                map x,y to
                  if x = empty then y else cons(first(x), ap(rest(x), y));
    l      := cons(1,cons(2,cons(3,empty)));
in (Y(APPEND))(l,l)
"""

FIB = """
let      Y := map f to let g := map x to f(x(x)); in g(g);
      pair := map x,y to cons(x, cons(y, empty));
   FIBHELP := map fibhelp to map k,fn,fnm1 to if k = 0 then fn else fibhelp(k - 1, fn + fnm1, fn);
in let FFIB := map ffib to map n to if n = 0 then 1 else (Y(FIBHELP))(n - 1,1,1);
   in let FIBS := map fibs to map k,l to
                    let fibk := (Y(FFIB))(k);
                    in if k >= 0 then fibs(k - 1, cons(pair(k,fibk), l)) else l;
      in (Y(FIBS))(10, empty)
"""

LAZY_BINDING_STRATEGIES = [
    "name_value", "name_name", "name_need",
    "need_value", "need_name", "need_need",
]


def test_math_op(run):
    assert str(run("2 * 3 + 12")) == "18"


def test_primitive_is_a_value(run):
    assert str(run("number?")) == "number?"


def test_operator_on_primitive_is_type_error(run):
    with pytest.raises(JamTypeError):
        run("1 + number?")


def test_append_with_y_combinator(run):
    assert str(run(APPEND)) == "(1 2 3 1 2 3)"


def test_append_with_empty_predicate(run):
    program = APPEND.replace("if x = empty", "if empty?(x)")
    assert str(run(program)) == "(1 2 3 1 2 3)"


def test_value_safe_y_factorial(run):
    program = f"let Y := {VALUE_Y}; FACT := map f to map n to if n = 0 then 1 else n * f(n - 1); in (Y(FACT))(6)"
    assert run(program) == 720


@pytest.mark.parametrize("strategy", LAZY_BINDING_STRATEGIES)
def test_lazy_y_factorial(strategy):
    program = f"let Y := {LAZY_Y}; FACT := map f to map n to if n = 0 then 1 else n * f(n - 1); in (Y(FACT))(6)"
    assert Interpreter(program).eval(strategy) == 720


@pytest.mark.parametrize("strategy", ["value_value", "value_name", "value_need"])
def test_lazy_y_diverges_under_call_by_value(strategy):
    program = f"let Y := {LAZY_Y}; FACT := map f to map n to if n = 0 then 1 else n * f(n - 1); in (Y(FACT))(6)"
    with pytest.raises(RecursionError):
        Interpreter(program).eval(strategy)


@pytest.mark.parametrize("strategy", LAZY_BINDING_STRATEGIES)
def test_fibonacci_pairs(strategy):
    expected = "((0 1) (1 1) (2 2) (3 3) (4 5) (5 8) (6 13) (7 21) (8 34) (9 55) (10 89))"
    assert str(Interpreter(FIB).eval(strategy)) == expected


def test_first_of_rest_of_rest(run):
    assert run("let x := cons(1,cons(2,cons(3,empty))); in first(rest(rest(x)))") == 3


def test_lexical_scoping(run):
    program = "let x := 1; in let f := map y to x + y; in let x := 10; in f(5)"
    assert run(program) == 6


def test_shadowing(run):
    assert run("let x := 1; in let x := 2; in x") == 2
    assert run("(map x to (map x to x * 10)(x + 1))(1)") == 20


def test_higher_order_functions(run):
    program = """
    let compose := map f,g to map x to f(g(x));
        inc     := map x to x + 1;
        double  := map x to x * 2;
    in (compose(inc, double))(5)
    """
    assert run(program) == 11


def test_mutually_recursive_let(run):
    program = """
    let even := map n to if n = 0 then true else odd(n - 1);
        odd  := map n to if n = 0 then false else even(n - 1);
    in even(10)
    """
    assert str(run(program)) == "true"


def test_let_may_reference_earlier_sibling(run):
    assert run("let y := 2; x := y + 1; in x") == 3


def test_forward_reference_depends_on_binding_policy(run, strategy):
    program = "let x := y + 1; y := 2; in x"
    if strategy.startswith("value"):
        with pytest.raises(JamIllegalForwardReference):
            run(program)
    else:
        assert run(program) == 3


def test_unused_failing_argument(run, strategy):
    program = "(map x to 5)(1 / 0)"
    if strategy.startswith("value"):
        with pytest.raises(ZeroDivisionError):
            run(program)
    else:
        assert run(program) == 5


def test_unused_divergent_binding(run, strategy):
    program = "let omega := (map x to x(x))(map x to x(x)); in 5"
    if strategy.startswith("value"):
        with pytest.raises(RecursionError):
            run(program)
    else:
        assert run(program) == 5


def test_if_requires_boolean(run):
    with pytest.raises(JamTypeError, match="used as test in if"):
        run("if 1 then 2 else 3")


def test_if_evaluates_only_chosen_branch(run):
    assert run("if 1 < 2 then 10 else 1 / 0") == 10
    assert run("if 1 > 2 then 1 / 0 else 20") == 20
