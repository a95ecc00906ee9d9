"""Context-sensitive checks run between parsing and evaluation.

Rejects, with JamSyntaxError:
- variables that are not bound by an enclosing `map` or `let`
- a variable bound twice by the same parameter list or the same `let`

Scopes are sets of Variables compared by identity. A `let` is recursive, so
all of its variables are in scope in every right-hand side and in the body.
"""

from __future__ import annotations

from typing import Iterable

from jam.ast import (
    AST, IntConstant, BoolConstant, EmptyList, PrimFun, Variable, FunctionLiteral,
    Application, If, Let, UnaryOpApp, BinaryOpApp,
)
from jam.errors import JamSyntaxError


def _check_duplicates(variables: Iterable[Variable], where: str) -> None:
    seen: set[int] = set()
    for var in variables:
        if id(var) in seen:
            raise JamSyntaxError(f"Variable {var} is bound more than once in {where}")
        seen.add(id(var))


def check(node: AST, scope: frozenset[Variable] = frozenset()) -> AST:
    """Check `node` against the variables in `scope`; returns the node unchanged."""
    match node:
        case IntConstant() | BoolConstant() | EmptyList() | PrimFun():
            pass
        case Variable():
            if node not in scope:
                raise JamSyntaxError(f"Free variable {node}")
        case FunctionLiteral(params, body):
            _check_duplicates(params, f"parameter list of {node}")
            check(body, scope | frozenset(params))
        case Application(rator, args):
            check(rator, scope)
            for arg in args:
                check(arg, scope)
        case If(test, conseq, alt):
            for part in (test, conseq, alt):
                check(part, scope)
        case Let(defs, body):
            lhs = [d.lhs for d in defs]
            _check_duplicates(lhs, "let")
            inner = scope | frozenset(lhs)
            for d in defs:
                check(d.rhs, inner)
            check(body, inner)
        case UnaryOpApp(_, operand):
            check(operand, scope)
        case BinaryOpApp(_, left, right):
            check(left, scope)
            check(right, scope)
        case _:
            raise JamSyntaxError(f"Not a Jam expression: {node!r}")
    return node
