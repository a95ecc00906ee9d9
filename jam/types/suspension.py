from __future__ import annotations

from typing import TYPE_CHECKING

from jam import JamAST, JamValue

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


class Suspension:
    """An unevaluated expression paired with the evaluator (environment and
    policies) it must eventually be evaluated in.

    Forcing does not cache; bindings and lazy cons cells decide that.
    """

    __slots__ = ("expr", "evaluator")

    def __init__(self, expr: JamAST, evaluator: Evaluator):
        self.expr = expr
        self.evaluator = evaluator

    def force(self) -> JamValue:
        return self.evaluator.evaluate(self.expr)

    def __str__(self) -> str:
        return f"<{self.expr}, {self.evaluator}>"

    def __repr__(self) -> str:
        return f"Suspension({self.expr!r})"
