"""Kind predicates over the Jam value domain."""

from __future__ import annotations

from jam import JamValue
from jam.types.closure import Closure
from jam.types.cons import Cons, is_list
from jam.types.constants import BoolConstant, EmptyList
from jam.types.prim_fun import PrimFun


def is_int(value: JamValue) -> bool:
    # Python bools are ints but are never Jam values
    return isinstance(value, int) and not isinstance(value, bool)


def is_function(value: JamValue) -> bool:
    return isinstance(value, (Closure, PrimFun))


def kind_of(value: JamValue) -> str:
    """Name of the kind of a Jam value, for error messages."""
    if is_int(value):
        return "integer"
    if isinstance(value, BoolConstant):
        return "boolean"
    if isinstance(value, EmptyList):
        return "empty list"
    if isinstance(value, Cons):
        return "cons"
    if isinstance(value, Closure):
        return "closure"
    if isinstance(value, PrimFun):
        return "primitive function"
    return type(value).__name__


__all__ = ["is_int", "is_function", "is_list", "kind_of"]
