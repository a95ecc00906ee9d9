"""
  Jam parser

Recursive descent over the token stream produced by jam.reader.lexer:

    exp     ::= if exp then exp else exp
              | let def+ in exp
              | map idlist to exp
              | binary
    binary  ::= term { binop term }        (precedence climbing, left associative)
    term    ::= unop term | factor { ( explist ) } | int | bool | empty
              | if ... | let ... | map ...  (extends as far as possible)
    factor  ::= ( exp ) | prim | id
    def     ::= id := exp ;

Binary operator precedence, loosest first: | then & then comparisons then
+ - then * /.

Variables are interned per parse: every occurrence of a name in one program
is the same Variable object, which is what the evaluator's identity lookup
relies on.
"""

from __future__ import annotations

from typing import Iterator, Optional

from jam.ast import (
    AST, UnaryOp, BinaryOp, IntConstant, Variable, FunctionLiteral, Application,
    If, Def, Let, UnaryOpApp, BinaryOpApp, PrimFun, TRUE, FALSE, EMPTY,
)
from jam.errors import JamSyntaxError
from jam.reader.lexer import lex

_INT64_MAX = (1 << 63) - 1

BINARY_PRECEDENCE: dict[str, int] = {
    "|": 1,
    "&": 2,
    "=": 3, "!=": 3, "<": 3, ">": 3, "<=": 3, ">=": 3,
    "+": 4, "-": 4,
    "*": 5, "/": 5,
}

UNARY_OPS = frozenset(op.value for op in UnaryOp)


def _describe(tok: tuple[Optional[str], Optional[str]]) -> str:
    tok_type, tok_val = tok
    return "end of input" if tok_type is None else repr(tok_val)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []
        self.variables: dict[str, Variable] = {}

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def expect(self, tok_type: str, tok_val: str | None = None) -> str:
        tok = self.advance()
        if tok[0] != tok_type or (tok_val is not None and tok[1] != tok_val):
            wanted = repr(tok_val) if tok_val is not None else tok_type
            raise JamSyntaxError(f"Expected {wanted} but found {_describe(tok)}")
        return tok[1]

    def at(self, tok_type: str, tok_val: str | None = None) -> bool:
        kind, val = self.peek()
        return kind == tok_type and (tok_val is None or val == tok_val)

    def variable(self, name: str) -> Variable:
        """Intern `name`: one Variable object per name for this program."""
        var = self.variables.get(name)
        if var is None:
            var = self.variables[name] = Variable(name)
        return var

    # ------------------------
    # Grammar
    # ------------------------
    def parse_program(self) -> AST:
        """Parse one complete expression; anything after it is an error."""
        exp = self.parse_exp()
        if self.peek()[0] is not None:
            raise JamSyntaxError(f"Unexpected {_describe(self.peek())} after end of expression")
        return exp

    def parse_exp(self) -> AST:
        if self.at("keyword", "if"):
            return self.parse_if()
        if self.at("keyword", "let"):
            return self.parse_let()
        if self.at("keyword", "map"):
            return self.parse_map()
        return self.parse_binary(1)

    def parse_if(self) -> If:
        self.expect("keyword", "if")
        test = self.parse_exp()
        self.expect("keyword", "then")
        conseq = self.parse_exp()
        self.expect("keyword", "else")
        return If(test, conseq, self.parse_exp())

    def parse_let(self) -> Let:
        self.expect("keyword", "let")
        defs = [self.parse_def()]
        while not self.at("keyword", "in"):
            defs.append(self.parse_def())
        self.expect("keyword", "in")
        return Let(tuple(defs), self.parse_exp())

    def parse_def(self) -> Def:
        lhs = self.variable(self.expect("id"))
        self.expect("gets")
        rhs = self.parse_exp()
        self.expect("semicolon")
        return Def(lhs, rhs)

    def parse_map(self) -> FunctionLiteral:
        self.expect("keyword", "map")
        params = []
        if not self.at("keyword", "to"):
            params.append(self.variable(self.expect("id")))
            while self.at("comma"):
                self.advance()
                params.append(self.variable(self.expect("id")))
        self.expect("keyword", "to")
        return FunctionLiteral(tuple(params), self.parse_exp())

    def parse_binary(self, min_precedence: int) -> AST:
        left = self.parse_term()
        while True:
            tok_type, tok_val = self.peek()
            if tok_type != "op" or tok_val not in BINARY_PRECEDENCE:
                return left
            precedence = BINARY_PRECEDENCE[tok_val]
            if precedence < min_precedence:
                return left
            self.advance()
            right = self.parse_binary(precedence + 1)
            left = BinaryOpApp(BinaryOp(tok_val), left, right)

    def parse_term(self) -> AST:
        tok_type, tok_val = self.peek()
        if tok_type == "op" and tok_val in UNARY_OPS:
            self.advance()
            return UnaryOpApp(UnaryOp(tok_val), self.parse_term())
        if tok_type == "keyword" and tok_val in ("if", "let", "map"):
            return self.parse_exp()
        if tok_type == "int":
            self.advance()
            value = int(tok_val)
            if value > _INT64_MAX:
                raise JamSyntaxError(f"Integer literal {tok_val} out of range")
            return IntConstant(value)
        if tok_type == "bool":
            self.advance()
            return TRUE if tok_val == "true" else FALSE
        if tok_type == "empty":
            self.advance()
            return EMPTY
        return self.parse_applications(self.parse_factor())

    def parse_factor(self) -> AST:
        tok = self.advance()
        tok_type, tok_val = tok
        if tok_type == "lparen":
            exp = self.parse_exp()
            self.expect("rparen")
            return exp
        if tok_type == "prim":
            return PrimFun.from_name(tok_val)
        if tok_type == "id":
            return self.variable(tok_val)
        raise JamSyntaxError(f"Expected an expression but found {_describe(tok)}")

    def parse_applications(self, rator: AST) -> AST:
        while self.at("lparen"):
            self.advance()
            args = []
            if not self.at("rparen"):
                args.append(self.parse_exp())
                while self.at("comma"):
                    self.advance()
                    args.append(self.parse_exp())
            self.expect("rparen")
            rator = Application(rator, tuple(args))
        return rator


def parse(source: str) -> AST:
    """Parse Jam source text into an AST (no context-sensitive checks)."""
    return TokenStream(lex(source)).parse_program()
