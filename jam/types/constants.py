"""Boolean and empty-list singletons.

Both double as AST constants and runtime values. They are compared by
identity everywhere; neither class overloads equality.
"""

from __future__ import annotations


class BoolConstant:
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def negate(self) -> BoolConstant:
        return FALSE if self is TRUE else TRUE

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def __repr__(self) -> str:
        return f"BoolConstant({self.value})"


TRUE = BoolConstant(True)
FALSE = BoolConstant(False)


def to_bool_constant(flag: bool) -> BoolConstant:
    return TRUE if flag else FALSE


class EmptyList:
    def __str__(self): return "()"
    def __repr__(self): return "empty"


EMPTY = EmptyList()
