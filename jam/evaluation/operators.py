"""Unary and binary operators.

Operators are strict whatever the binding policy: operands are evaluated
immediately and type-checked. `&` and `|` evaluate their right operand only
when the left one does not decide the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jam import JamAST, JamValue
from jam.ast import UnaryOp, BinaryOp
from jam.errors import JamTypeError
from jam.types.closure import Closure
from jam.types.cons import Cons
from jam.types.constants import BoolConstant, TRUE, FALSE, to_bool_constant
from jam.types.values import is_int, kind_of

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator

_INT64_MASK = (1 << 64) - 1


def to_int64(n: int) -> int:
    """Wrap n into the signed 64-bit range."""
    n &= _INT64_MASK
    return n - (1 << 64) if n >= (1 << 63) else n


def _divide(a: int, b: int) -> int:
    # Integer division truncating toward zero; b == 0 raises ZeroDivisionError
    q = abs(a) // abs(b)
    return to_int64(q if (a < 0) == (b < 0) else -q)


def _check_int(kind: str, op, value: JamValue) -> int:
    if is_int(value):
        return value
    raise JamTypeError(f"{kind} operator `{op}' applied to non-integer {value} ({kind_of(value)})")


def _check_bool(kind: str, op, value: JamValue) -> BoolConstant:
    if isinstance(value, BoolConstant):
        return value
    raise JamTypeError(f"{kind} operator `{op}' applied to non-boolean {value} ({kind_of(value)})")


def apply_unary(op: UnaryOp, value: JamValue) -> JamValue:
    match op:
        case UnaryOp.PLUS:
            return _check_int("Unary", op, value)
        case UnaryOp.MINUS:
            return to_int64(-_check_int("Unary", op, value))
        case UnaryOp.NOT:
            return _check_bool("Unary", op, value).negate()
    raise JamTypeError(f"Unknown unary operator {op!r}")


def equal_values(a: JamValue, b: JamValue) -> bool:
    """Structural equality over Jam values; values of different kinds are unequal."""
    while isinstance(a, Cons) and isinstance(b, Cons):
        if a is b:
            return True
        if not equal_values(a.first(), b.first()):
            return False
        a, b = a.rest(), b.rest()
    if is_int(a) and is_int(b):
        return a == b
    if isinstance(a, Closure) and isinstance(b, Closure):
        # Same literal captured in the same environment
        return a.function is b.function and a.env is b.env
    # Booleans, empty and primitives compare by identity
    return a is b


_ARITHMETIC = {
    BinaryOp.PLUS: lambda a, b: to_int64(a + b),
    BinaryOp.MINUS: lambda a, b: to_int64(a - b),
    BinaryOp.TIMES: lambda a, b: to_int64(a * b),
    BinaryOp.DIVIDE: _divide,
}

_COMPARISON = {
    BinaryOp.LESS_THAN: lambda a, b: a < b,
    BinaryOp.GREATER_THAN: lambda a, b: a > b,
    BinaryOp.LESS_THAN_EQUALS: lambda a, b: a <= b,
    BinaryOp.GREATER_THAN_EQUALS: lambda a, b: a >= b,
}


def apply_binary(op: BinaryOp, left: JamAST, right: JamAST, ev: Evaluator) -> JamValue:
    """Evaluate `left op right` with the given evaluator."""
    if op in _ARITHMETIC:
        a = _check_int("Binary", op, ev.evaluate(left))
        b = _check_int("Binary", op, ev.evaluate(right))
        return _ARITHMETIC[op](a, b)

    if op in _COMPARISON:
        a = _check_int("Binary", op, ev.evaluate(left))
        b = _check_int("Binary", op, ev.evaluate(right))
        return to_bool_constant(_COMPARISON[op](a, b))

    match op:
        case BinaryOp.EQUALS:
            return to_bool_constant(equal_values(ev.evaluate(left), ev.evaluate(right)))
        case BinaryOp.NOT_EQUALS:
            return to_bool_constant(not equal_values(ev.evaluate(left), ev.evaluate(right)))
        case BinaryOp.AND:
            if _check_bool("Binary", op, ev.evaluate(left)) is FALSE:
                return FALSE
            return _check_bool("Binary", op, ev.evaluate(right))
        case BinaryOp.OR:
            if _check_bool("Binary", op, ev.evaluate(left)) is TRUE:
                return TRUE
            return _check_bool("Binary", op, ev.evaluate(right))
    raise JamTypeError(f"Unknown binary operator {op!r}")
