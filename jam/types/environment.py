"""Runtime environment for Jam.

An Environment is a persistent singly linked list of Bindings, newest first.
Extending allocates a new head node that shares the existing chain; no
environment is ever mutated, so closures and suspensions can hold on to the
one they captured. Lookup compares Variables by identity, never by name.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from jam import JamValue
from jam.ast import Variable
from jam.errors import JamUnboundVariable
from jam.types.binding import Binding


class Environment:
    """Immutable chain of Bindings; the empty chain is the shared EMPTY_ENV."""

    __slots__ = ("binding", "outer")

    def __init__(self, binding: Optional[Binding] = None, outer: Optional[Environment] = None):
        self.binding: Binding | None = binding
        self.outer: Environment | None = outer

    @property
    def is_empty(self) -> bool:
        return self.binding is None

    def extend(self, binding: Binding) -> Environment:
        """Return a new environment with `binding` in front of this one."""
        return Environment(binding, self)

    def find(self, var: Variable) -> Optional[Binding]:
        """Find the newest binding for `var`, or None."""
        env: Environment | None = self
        while env is not None and env.binding is not None:
            if env.binding.var is var:
                return env.binding
            env = env.outer
        return None

    def lookup(self, var: Variable) -> JamValue:
        """Look up the value bound to `var`.

        Raises JamUnboundVariable if the chain is exhausted.
        """
        binding = self.find(var)
        if binding is None:
            raise JamUnboundVariable(f"variable {var} is unbound")
        return binding.value()

    def __iter__(self) -> Iterator[Binding]:
        env: Environment | None = self
        while env is not None and env.binding is not None:
            yield env.binding
            env = env.outer

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(b) for b in self))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            buffer.write(" -> ".join(repr(b) for b in self) or "empty")
            buffer.write(">")
            return buffer.getvalue()


EMPTY_ENV = Environment()
