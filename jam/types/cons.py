"""List cells for the three cons policies.

`Cons` holds materialized values. `LazyNameCons` holds one Suspension per
component and re-forces it on every access. `LazyNeedCons` forces each
suspension once and keeps the value in its place.

Lazy cells cannot check that their rest is a list when they are built; the
check happens when the rest is forced.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from jam import JamValue
from jam.errors import JamTypeError
from jam.types.constants import EmptyList
from jam.types.suspension import Suspension


def is_list(value: JamValue) -> bool:
    return isinstance(value, (Cons, EmptyList))


def check_list(value: JamValue) -> JamValue:
    if not is_list(value):
        raise JamTypeError(f"Second argument {value} to `cons' is not a list")
    return value


class Cons:
    __slots__ = ("_first", "_rest")

    def __init__(self, first: JamValue, rest: JamValue):
        self._first = first
        self._rest = rest

    def first(self) -> JamValue:
        return self._first

    def rest(self) -> JamValue:
        return self._rest

    def __iter__(self) -> Iterator[JamValue]:
        """Yield the elements of this list, forcing lazy components as needed."""
        cell: JamValue = self
        while isinstance(cell, Cons):
            yield cell.first()
            cell = cell.rest()

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(e) for e in self))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._first!r}, {self._rest!r})"


class LazyNameCons(Cons):
    __slots__ = ()

    def __init__(self, first: Suspension, rest: Suspension):
        super().__init__(first, rest)

    def first(self) -> JamValue:
        return self._first.force()

    def rest(self) -> JamValue:
        return check_list(self._rest.force())


class LazyNeedCons(LazyNameCons):
    __slots__ = ("_first_forced", "_rest_forced")

    def __init__(self, first: Suspension, rest: Suspension):
        super().__init__(first, rest)
        self._first_forced = False
        self._rest_forced = False

    def first(self) -> JamValue:
        if not self._first_forced:
            self._first = self._first.force()
            self._first_forced = True
        return self._first

    def rest(self) -> JamValue:
        if not self._rest_forced:
            self._rest = check_list(self._rest.force())
            self._rest_forced = True
        return self._rest
