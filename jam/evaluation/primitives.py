"""Application of Jam primitive functions.

Every primitive except `cons` evaluates all of its arguments eagerly,
whatever the binding policy. `cons` hands its unevaluated operands to the
evaluator's cons policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from jam import JamAST, JamValue
from jam.errors import JamArityError, JamTypeError
from jam.types.closure import Closure
from jam.types.cons import Cons, is_list
from jam.types.constants import EmptyList, to_bool_constant
from jam.types.prim_fun import PrimFun
from jam.types.values import is_int, is_function, kind_of

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


def _check_arity(prim: PrimFun, args: Sequence[JamAST]) -> None:
    if len(args) != prim.arity:
        raise JamArityError(
            f"Primitive function `{prim}' applied to {len(args)} arguments; expects {prim.arity}"
        )


def _confirm_cons(prim: PrimFun, value: JamValue) -> Cons:
    if isinstance(value, Cons):
        return value
    raise JamTypeError(
        f"Primitive function `{prim}' applied to argument {value} ({kind_of(value)}) that is not a cons"
    )


def _arity_of(value: JamValue) -> int:
    if isinstance(value, Closure):
        return value.arity
    if isinstance(value, PrimFun):
        return value.arity
    raise JamTypeError(f"Primitive function `arity' applied to non-function {value} ({kind_of(value)})")


_PREDICATES = {
    PrimFun.FUNCTION_P: is_function,
    PrimFun.NUMBER_P: is_int,
    PrimFun.LIST_P: is_list,
    PrimFun.CONS_P: lambda v: isinstance(v, Cons),
    PrimFun.EMPTY_P: lambda v: isinstance(v, EmptyList),
}


def apply_primitive(prim: PrimFun, args: Sequence[JamAST], ev: Evaluator) -> JamValue:
    """Apply `prim` to the argument expressions `args` in the context of `ev`."""
    if prim is PrimFun.CONS:
        _check_arity(prim, args)
        return ev.cons_policy.make_cons(args[0], args[1], ev)

    values = [ev.evaluate(arg) for arg in args]
    _check_arity(prim, values)
    value = values[0]

    predicate = _PREDICATES.get(prim)
    if predicate is not None:
        return to_bool_constant(predicate(value))

    match prim:
        case PrimFun.ARITY:
            return _arity_of(value)
        case PrimFun.FIRST:
            return _confirm_cons(prim, value).first()
        case PrimFun.REST:
            return _confirm_cons(prim, value).rest()
    raise JamTypeError(f"Unknown primitive function {prim!r}")
