"""Closure representation for Jam function values."""

from __future__ import annotations

from jam import JamAST
from jam.ast import FunctionLiteral, Variable
from jam.types.environment import Environment


class Closure:
    """A function literal paired with the environment it was evaluated in."""

    __slots__ = ("function", "env")

    def __init__(self, function: FunctionLiteral, env: Environment):
        self.function: FunctionLiteral = function
        # Captured once, at the point the literal is evaluated
        self.env: Environment = env

    @property
    def params(self) -> tuple[Variable, ...]:
        return self.function.params

    @property
    def body(self) -> JamAST:
        return self.function.body

    @property
    def arity(self) -> int:
        return self.function.arity

    def __str__(self) -> str:
        return f"(closure: {self.function})"

    def __repr__(self) -> str:
        """Return the Jam-style representation of the closure."""
        return str(self)
