"""Core evaluator for Jam.

A single tree walker parameterized by a BindingPolicy (how function
arguments and let definitions are bound) and a ConsPolicy (how `cons`
builds list cells). An Evaluator also carries the environment it evaluates
in; entering a scope makes a new Evaluator with the same policies.
"""

from __future__ import annotations

from typing import Sequence

from jam import JamAST, JamValue
from jam.ast import (
    IntConstant, Variable, FunctionLiteral, Application, If, Let,
    UnaryOpApp, BinaryOpApp,
)
from jam.errors import JamArityError, JamTypeError
from jam.evaluation.operators import apply_unary, apply_binary
from jam.evaluation.policies import BindingPolicy, ConsPolicy
from jam.evaluation.primitives import apply_primitive
from jam.types.binding import Binding
from jam.types.closure import Closure
from jam.types.constants import BoolConstant, EmptyList, TRUE
from jam.types.environment import Environment, EMPTY_ENV
from jam.types.prim_fun import PrimFun
from jam.types.suspension import Suspension
from jam.types.values import kind_of


class Evaluator:
    """Evaluates AST nodes in `env` under the given pair of policies."""

    __slots__ = ("binding_policy", "cons_policy", "env")

    def __init__(
        self,
        binding_policy: BindingPolicy,
        cons_policy: ConsPolicy,
        env: Environment = EMPTY_ENV,
    ):
        self.binding_policy = binding_policy
        self.cons_policy = cons_policy
        self.env = env

    def with_env(self, env: Environment) -> Evaluator:
        """A new evaluator for `env` with the same policies as this one."""
        return Evaluator(self.binding_policy, self.cons_policy, env)

    def new_binding(self, var: Variable, expr: JamAST) -> Binding:
        """Bind var to expr as evaluated here, according to the binding policy."""
        return self.binding_policy.new_binding(var, expr, self)

    def evaluate(self, node: JamAST) -> JamValue:
        match node:
            case IntConstant(value):
                return value
            case BoolConstant() | EmptyList() | PrimFun():
                return node
            case Variable():
                return self.env.lookup(node)
            case FunctionLiteral():
                return Closure(node, self.env)
            case If(test, conseq, alt):
                return self._evaluate_if(test, conseq, alt)
            case Let(defs, body):
                return self._evaluate_let(defs, body)
            case Application(rator, args):
                return self.apply(self.evaluate(rator), args, node)
            case UnaryOpApp(op, operand):
                return apply_unary(op, self.evaluate(operand))
            case BinaryOpApp(op, left, right):
                return apply_binary(op, left, right, self)
        raise JamTypeError(f"Cannot evaluate {node!r}: not a Jam expression")

    def _evaluate_if(self, test: JamAST, conseq: JamAST, alt: JamAST) -> JamValue:
        flag = self.evaluate(test)
        if not isinstance(flag, BoolConstant):
            raise JamTypeError(f"non-boolean {flag} ({kind_of(flag)}) used as test in if")
        return self.evaluate(conseq if flag is TRUE else alt)

    def _evaluate_let(self, defs: Sequence, body: JamAST) -> JamValue:
        # Recursive let: every definition sees every variable of the block.
        # Placeholders go in first; each definition is then installed in order.
        placeholders = [self.binding_policy.new_placeholder(d.lhs) for d in defs]
        env = self.env
        for binding in placeholders:
            env = env.extend(binding)
        inner = self.with_env(env)
        for binding, d in zip(placeholders, defs):
            binding.install(Suspension(d.rhs, inner))
        return inner.evaluate(body)

    def apply(self, head: JamValue, args: Sequence[JamAST], app: JamAST = None) -> JamValue:
        """Apply a function value to unevaluated argument expressions."""
        if isinstance(head, Closure):
            return self.apply_closure(head, args)
        if isinstance(head, PrimFun):
            return apply_primitive(head, args, self)
        where = f" at head of application {app}" if app is not None else ""
        raise JamTypeError(f"{head} ({kind_of(head)}) appears{where} but it is not a valid function")

    def apply_closure(self, closure: Closure, args: Sequence[JamAST]) -> JamValue:
        if len(args) != closure.arity:
            raise JamArityError(
                f"closure {closure} expects {closure.arity} arguments but was applied to {len(args)}"
            )
        # Arguments are bound in the closure's environment but evaluated in ours
        env = closure.env
        for param, arg in zip(closure.params, args):
            env = env.extend(self.new_binding(param, arg))
        return self.with_env(env).evaluate(closure.body)

    def __str__(self) -> str:
        return f"Evaluator({self.binding_policy}/{self.cons_policy})"

    def __repr__(self) -> str:
        return f"<Evaluator binding={self.binding_policy} cons={self.cons_policy} env={self.env!r}>"
