from __future__ import annotations

import logging
import sys

from jam import JamAST, JamValue
from jam.config import get_binding_policy_name, get_cons_policy_name, get_recursion_limit
from jam.evaluation.evaluator import Evaluator
from jam.evaluation.policies import (
    BindingPolicy, ConsPolicy, BINDING_POLICIES, CONS_POLICIES,
    CALL_BY_VALUE, CALL_BY_NAME, CALL_BY_NEED, EAGER, LAZY_NAME, LAZY_NEED,
)
from jam.reader import parse_and_check

logger = logging.getLogger(__name__)

# (binding policy, cons policy) for each named strategy
STRATEGIES: dict[str, tuple[BindingPolicy, ConsPolicy]] = {
    "value_value": (CALL_BY_VALUE, EAGER),
    "value_name": (CALL_BY_VALUE, LAZY_NAME),
    "value_need": (CALL_BY_VALUE, LAZY_NEED),
    "name_value": (CALL_BY_NAME, EAGER),
    "name_name": (CALL_BY_NAME, LAZY_NAME),
    "name_need": (CALL_BY_NAME, LAZY_NEED),
    "need_value": (CALL_BY_NEED, EAGER),
    "need_name": (CALL_BY_NEED, LAZY_NAME),
    "need_need": (CALL_BY_NEED, LAZY_NEED),
}

# Config names cons policies eager/name/need; strategy names use value for eager
_CONS_SUFFIX = {"eager": "value", "name": "name", "need": "need"}


def strategy_name(binding_policy: BindingPolicy, cons_policy: ConsPolicy) -> str:
    return f"{binding_policy.name}_{_CONS_SUFFIX[cons_policy.name]}"


def _ensure_recursion_limit() -> None:
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        logger.debug("raising recursion limit from %d to %d", sys.getrecursionlimit(), limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Evaluates one Jam program under any of the nine combinations of binding
    policy (value, name, need) and cons policy (eager, lazy by name, lazy by
    need). The program is parsed and checked once, at construction.
    """
    def __init__(self, program: str | JamAST):
        if isinstance(program, str):
            self.prog = parse_and_check(program)
            logger.debug("parsed program: %s", self.prog)
        else:
            self.prog = program

    def run(self, binding_policy: BindingPolicy, cons_policy: ConsPolicy) -> JamValue:
        """Evaluate the program with an arbitrary pair of policies."""
        _ensure_recursion_limit()
        logger.debug("evaluating with binding=%s cons=%s", binding_policy, cons_policy)
        return Evaluator(binding_policy, cons_policy).evaluate(self.prog)

    def eval(self, strategy: str | None = None) -> JamValue:
        """Evaluate under a named strategy such as 'need_name'.

        Defaults to the strategy configured by JAM_BINDING_POLICY and
        JAM_CONS_POLICY.
        """
        if strategy is None:
            strategy = strategy_name(*configured_policies())
        try:
            policies = STRATEGIES[strategy]
        except KeyError:
            raise ValueError(f"Unknown strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}") from None
        return self.run(*policies)

    # Call-by-value, -name and -need with eager cons
    def call_by_value(self) -> JamValue: return self.run(CALL_BY_VALUE, EAGER)
    def call_by_name(self) -> JamValue: return self.run(CALL_BY_NAME, EAGER)
    def call_by_need(self) -> JamValue: return self.run(CALL_BY_NEED, EAGER)

    def value_value(self) -> JamValue: return self.run(CALL_BY_VALUE, EAGER)
    def value_name(self) -> JamValue: return self.run(CALL_BY_VALUE, LAZY_NAME)
    def value_need(self) -> JamValue: return self.run(CALL_BY_VALUE, LAZY_NEED)
    def name_value(self) -> JamValue: return self.run(CALL_BY_NAME, EAGER)
    def name_name(self) -> JamValue: return self.run(CALL_BY_NAME, LAZY_NAME)
    def name_need(self) -> JamValue: return self.run(CALL_BY_NAME, LAZY_NEED)
    def need_value(self) -> JamValue: return self.run(CALL_BY_NEED, EAGER)
    def need_name(self) -> JamValue: return self.run(CALL_BY_NEED, LAZY_NAME)
    def need_need(self) -> JamValue: return self.run(CALL_BY_NEED, LAZY_NEED)


def configured_policies() -> tuple[BindingPolicy, ConsPolicy]:
    """The policy pair selected by JAM_BINDING_POLICY and JAM_CONS_POLICY."""
    return BINDING_POLICIES[get_binding_policy_name()], CONS_POLICIES[get_cons_policy_name()]


def run(program: str | JamAST, strategy: str | None = None) -> JamValue:
    """Parse, check and evaluate `program` in one step."""
    return Interpreter(program).eval(strategy)
