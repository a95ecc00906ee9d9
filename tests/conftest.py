import pytest

from jam.interpreter import Interpreter, STRATEGIES

# Tests that take the `strategy` fixture (directly or through `run`) run
# nine times, once per (binding policy, cons policy) pair:
#   value_value value_name value_need
#   name_value  name_name  name_need
#   need_value  need_name  need_need
# The first half of the name is the binding policy, the second the cons policy.


@pytest.fixture(params=list(STRATEGIES))
def strategy(request):
    return request.param


@pytest.fixture
def run(strategy):
    """Evaluate Jam source under the current strategy."""
    def _run(source):
        return Interpreter(source).eval(strategy)
    return _run


class ScriptedEvaluator:
    """Stands in for an Evaluator: returns (or raises) scripted results and
    counts how often it was asked to evaluate."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def evaluate(self, expr):
        self.calls += 1
        if not self.results:
            raise AssertionError(f"unexpected evaluation #{self.calls} of {expr!r}")
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def scripted():
    return ScriptedEvaluator


@pytest.fixture(autouse=True)
def _clean_jam_environment(monkeypatch):
    # Tests choose their own policies; ignore whatever the shell exported
    for var in ("JAM_BINDING_POLICY", "JAM_CONS_POLICY", "JAM_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)
