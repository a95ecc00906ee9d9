import sys

import pytest

from jam import config
from jam.ast import BinaryOp, BinaryOpApp, IntConstant
from jam.evaluation.policies import CALL_BY_NAME, CALL_BY_NEED, CALL_BY_VALUE, EAGER, LAZY_NEED
from jam.interpreter import Interpreter, STRATEGIES, configured_policies, run, strategy_name


def test_defaults():
    assert config.get_binding_policy_name() == "value"
    assert config.get_cons_policy_name() == "eager"
    assert config.get_recursion_limit() == 10000
    assert configured_policies() == (CALL_BY_VALUE, EAGER)


def test_policies_from_environment(monkeypatch):
    monkeypatch.setenv("JAM_BINDING_POLICY", " Need ")
    monkeypatch.setenv("JAM_CONS_POLICY", "need")
    assert configured_policies() == (CALL_BY_NEED, LAZY_NEED)


@pytest.mark.parametrize(
    "var, value",
    [
        ("JAM_BINDING_POLICY", "lazy"),
        ("JAM_CONS_POLICY", "value"),
        ("JAM_RECURSION_LIMIT", "lots"),
        ("JAM_RECURSION_LIMIT", "0"),
        ("JAM_RECURSION_LIMIT", "-5"),
    ],
)
def test_invalid_configuration(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError, match=var):
        Interpreter("1").eval()


def test_recursion_limit_is_only_raised(monkeypatch):
    monkeypatch.setenv("JAM_RECURSION_LIMIT", "50")
    before = sys.getrecursionlimit()
    Interpreter("1").eval("value_value")
    assert sys.getrecursionlimit() == before


def test_recursion_limit_raised_on_run(monkeypatch):
    before = sys.getrecursionlimit()
    monkeypatch.setenv("JAM_RECURSION_LIMIT", str(before + 1000))
    try:
        Interpreter("1").eval("value_value")
        assert sys.getrecursionlimit() == before + 1000
    finally:
        sys.setrecursionlimit(before)


def test_default_strategy_follows_environment(monkeypatch):
    program = "(map x to 5)(1 / 0)"
    with pytest.raises(ZeroDivisionError):
        Interpreter(program).eval()
    monkeypatch.setenv("JAM_BINDING_POLICY", "name")
    assert Interpreter(program).eval() == 5


def test_unknown_strategy():
    with pytest.raises(ValueError, match="Unknown strategy 'lazy_lazy'"):
        Interpreter("1").eval("lazy_lazy")


def test_strategy_names():
    assert len(STRATEGIES) == 9
    for name, policies in STRATEGIES.items():
        assert strategy_name(*policies) == name


def test_named_methods_match_strategies():
    program = "let x := cons(1, cons(2, empty)); in rest(x)"
    interpreter = Interpreter(program)
    for name in STRATEGIES:
        assert str(getattr(interpreter, name)()) == "(2)"
    assert str(interpreter.call_by_value()) == "(2)"
    assert str(interpreter.call_by_name()) == "(2)"
    assert str(interpreter.call_by_need()) == "(2)"


def test_interpreter_accepts_ast():
    tree = BinaryOpApp(BinaryOp.PLUS, IntConstant(2), IntConstant(3))
    assert Interpreter(tree).prog is tree
    assert Interpreter(tree).eval("need_need") == 5


def test_run_helper():
    assert run("2 * 21") == 42
    assert run("2 * 21", "name_need") == 42


def test_custom_policy_pair():
    # Any binding policy may be paired with any cons policy
    assert Interpreter("(map x to first(x))(cons(7, empty))").run(CALL_BY_NAME, LAZY_NEED) == 7


def test_program_is_reusable():
    interpreter = Interpreter("let f := map n to n * n; in f(12)")
    assert [interpreter.eval(name) for name in STRATEGIES] == [144] * 9
