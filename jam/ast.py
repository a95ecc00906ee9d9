"""Abstract syntax for Jam programs.

The reader builds these nodes; the evaluator walks them. Nodes are immutable.
`Variable` compares by identity: the parser interns one Variable per name and
program, so every occurrence bound by the same definition is the same object.

Boolean constants, the empty list and primitive functions are shared with the
value domain (jam.types) and are re-exported here so that reader code can
build complete trees from this module alone. `str(node)` renders Jam source.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from jam.types.constants import BoolConstant, EmptyList, TRUE, FALSE, EMPTY
from jam.types.prim_fun import PrimFun


class UnaryOp(Enum):
    PLUS = "+"
    MINUS = "-"
    NOT = "~"

    def __str__(self) -> str:
        return self.value


class BinaryOp(Enum):
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    EQUALS = "="
    NOT_EQUALS = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_EQUALS = "<="
    GREATER_THAN_EQUALS = ">="
    AND = "&"
    OR = "|"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntConstant:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=False)
class Variable:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FunctionLiteral:
    params: Tuple[Variable, ...]
    body: AST

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        params = ",".join(str(p) for p in self.params)
        head = f"map {params} to" if params else "map to"
        return f"{head} {_source(self.body)}"


@dataclass(frozen=True)
class Application:
    rator: AST
    args: Tuple[AST, ...]

    def __str__(self) -> str:
        return f"{_operand(self.rator)}({', '.join(_source(a) for a in self.args)})"


@dataclass(frozen=True)
class If:
    test: AST
    conseq: AST
    alt: AST

    def __str__(self) -> str:
        return f"if {_source(self.test)} then {_source(self.conseq)} else {_source(self.alt)}"


@dataclass(frozen=True)
class Def:
    lhs: Variable
    rhs: AST

    def __str__(self) -> str:
        return f"{self.lhs} := {_source(self.rhs)};"


@dataclass(frozen=True)
class Let:
    defs: Tuple[Def, ...]
    body: AST

    def __str__(self) -> str:
        return f"let {' '.join(str(d) for d in self.defs)} in {_source(self.body)}"


@dataclass(frozen=True)
class UnaryOpApp:
    op: UnaryOp
    operand: AST

    def __str__(self) -> str:
        return f"{self.op}{_operand(self.operand)}"


@dataclass(frozen=True)
class BinaryOpApp:
    op: BinaryOp
    left: AST
    right: AST

    def __str__(self) -> str:
        return f"{_operand(self.left)} {self.op} {_operand(self.right)}"


# The empty-list literal is the EMPTY singleton itself.
EmptyListConstant = EmptyList

AST = Union[
    IntConstant, BoolConstant, EmptyList, Variable, PrimFun, FunctionLiteral,
    Application, If, Let, UnaryOpApp, BinaryOpApp,
]

_ATOMIC = (IntConstant, BoolConstant, EmptyList, Variable, PrimFun, Application)


def _source(node: AST) -> str:
    # EMPTY renders as "()" when printed as a value
    return "empty" if node is EMPTY else str(node)


def _operand(node: AST) -> str:
    """Render a sub-expression, parenthesised unless it is atomic."""
    if isinstance(node, _ATOMIC):
        return _source(node)
    return f"({node})"


__all__ = [
    "AST", "UnaryOp", "BinaryOp", "IntConstant", "BoolConstant", "EmptyList",
    "EmptyListConstant", "Variable", "PrimFun", "FunctionLiteral", "Application",
    "If", "Def", "Let", "UnaryOpApp", "BinaryOpApp", "TRUE", "FALSE", "EMPTY",
]
