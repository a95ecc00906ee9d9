from __future__ import annotations

from enum import Enum


class PrimFun(Enum):
    """The fixed set of Jam primitive functions, keyed by their source name."""

    FUNCTION_P = "function?"
    NUMBER_P = "number?"
    LIST_P = "list?"
    CONS_P = "cons?"
    EMPTY_P = "empty?"
    CONS = "cons"
    ARITY = "arity"
    FIRST = "first"
    REST = "rest"

    @property
    def arity(self) -> int:
        return 2 if self is PrimFun.CONS else 1

    @classmethod
    def from_name(cls, name: str) -> PrimFun | None:
        return _BY_NAME.get(name)

    def __str__(self) -> str:
        return self.value


_BY_NAME = {p.value: p for p in PrimFun}
