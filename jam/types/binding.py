"""Variable bindings for the three binding policies.

A binding pairs a Variable with either a value or a Suspension. `value()`
is what environment lookup returns; each variant decides when (and how
often) the suspension is forced.

Every variant can start life as a placeholder: its value and suspension are
both None until `install()` supplies the definition. Recursive `let` builds
its environment out of placeholders; reading one early raises
JamIllegalForwardReference.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from jam import JamValue
from jam.ast import Variable
from jam.errors import JamIllegalForwardReference
from jam.types.suspension import Suspension


def illegal_forward_reference(var: Variable) -> JamIllegalForwardReference:
    return JamIllegalForwardReference(
        f"Attempt to evaluate variable {var} before its definition was installed "
        f"(illegal forward reference)"
    )


class Binding(ABC):
    __slots__ = ("var", "_value")

    def __init__(self, var: Variable, value: JamValue | None = None):
        self.var = var
        self._value = value

    @abstractmethod
    def value(self) -> JamValue:
        ...

    @abstractmethod
    def install(self, suspension: Suspension) -> None:
        """Supply the definition of a placeholder binding."""

    def __repr__(self) -> str:
        return str(self)


class ValueBinding(Binding):
    """Call-by-value: the value is computed when the binding is made."""

    __slots__ = ()

    def value(self) -> JamValue:
        if self._value is None:
            raise illegal_forward_reference(self.var)
        return self._value

    def install(self, suspension: Suspension) -> None:
        self._value = suspension.force()

    def __str__(self) -> str:
        return f"[{self.var}, {self._value}]"


class NameBinding(Binding):
    """Call-by-name: the suspension is forced on every lookup."""

    __slots__ = ("suspension",)

    def __init__(self, var: Variable, suspension: Suspension | None = None):
        super().__init__(var)
        self.suspension = suspension

    def value(self) -> JamValue:
        if self.suspension is None:
            raise illegal_forward_reference(self.var)
        return self.suspension.force()

    def install(self, suspension: Suspension) -> None:
        self.suspension = suspension

    def __str__(self) -> str:
        return f"[{self.var}, {self.suspension}]"


class NeedBinding(NameBinding):
    """Call-by-need: the suspension is forced on first lookup only.

    The forced value replaces the suspension, which is dropped so that its
    captured environment is no longer retained.
    """

    __slots__ = ()

    def value(self) -> JamValue:
        if self._value is None:
            if self.suspension is None:
                raise illegal_forward_reference(self.var)
            self._value = self.suspension.force()
            self.suspension = None
        return self._value

    @property
    def forced(self) -> bool:
        return self._value is not None

    def __str__(self) -> str:
        return f"[{self.var}, {self._value}, {self.suspension}]"
