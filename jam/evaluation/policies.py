"""Binding and cons policies.

A policy is a small frozen record of operations handed to the Evaluator.
Binding policy and cons policy are independent, so any of the three binding
policies can be paired with any of the three cons policies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from jam import JamAST
from jam.ast import Variable
from jam.types.binding import Binding, ValueBinding, NameBinding, NeedBinding
from jam.types.cons import Cons, LazyNameCons, LazyNeedCons, check_list
from jam.types.suspension import Suspension

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


@dataclass(frozen=True)
class BindingPolicy:
    name: str
    # Bind var to the value of expr as evaluated by the given evaluator
    new_binding: Callable[[Variable, JamAST, "Evaluator"], Binding]
    # A binding for var whose definition is installed later
    new_placeholder: Callable[[Variable], Binding]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ConsPolicy:
    name: str
    # Build a list cell from the (unevaluated) operands of `cons`
    make_cons: Callable[[JamAST, JamAST, "Evaluator"], Cons]

    def __str__(self) -> str:
        return self.name


CALL_BY_VALUE = BindingPolicy(
    "value",
    lambda var, expr, ev: ValueBinding(var, ev.evaluate(expr)),
    ValueBinding,
)

CALL_BY_NAME = BindingPolicy(
    "name",
    lambda var, expr, ev: NameBinding(var, Suspension(expr, ev)),
    NameBinding,
)

CALL_BY_NEED = BindingPolicy(
    "need",
    lambda var, expr, ev: NeedBinding(var, Suspension(expr, ev)),
    NeedBinding,
)


def _eager_cons(first: JamAST, rest: JamAST, ev: Evaluator) -> Cons:
    first_value = ev.evaluate(first)
    return Cons(first_value, check_list(ev.evaluate(rest)))


EAGER = ConsPolicy("eager", _eager_cons)

LAZY_NAME = ConsPolicy(
    "name",
    lambda first, rest, ev: LazyNameCons(Suspension(first, ev), Suspension(rest, ev)),
)

LAZY_NEED = ConsPolicy(
    "need",
    lambda first, rest, ev: LazyNeedCons(Suspension(first, ev), Suspension(rest, ev)),
)

BINDING_POLICIES = {p.name: p for p in (CALL_BY_VALUE, CALL_BY_NAME, CALL_BY_NEED)}
CONS_POLICIES = {p.name: p for p in (EAGER, LAZY_NAME, LAZY_NEED)}
