"""
  Jam lexer

- Regex driven token generator
- Yields (token_type, token_value) tuples:

    - integers      -> ("int", "42")
    - true/false    -> ("bool", "true")
    - empty         -> ("empty", "empty")
    - keywords      -> ("keyword", "let")     if then else let in map to
    - primitives    -> ("prim", "number?")
    - identifiers   -> ("id", "x")
    - operators     -> ("op", "<=")
    - :=            -> ("gets", ":=")
    - ( ) , ;       -> ("lparen", "(") ...

- `//` line comments and `/* ... */` block comments are skipped
"""

from __future__ import annotations

import re
from typing import Iterator

from jam.errors import JamSyntaxError
from jam.types.prim_fun import PrimFun

TOKEN_RE = re.compile(
    r"(?P<comment>//[^\n]*)"  # single-line comment
    r"|(?P<ml_comment>/\*.*?\*/)"  # block comment
    r"|(?P<int>\d+)"
    r"|(?P<word>[A-Za-z_][A-Za-z0-9_]*\??)"  # identifiers, keywords, primitives
    r"|(?P<gets>:=)"
    r"|(?P<op>!=|<=|>=|[-+*/=<>&|~])"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<comma>,)"
    r"|(?P<semicolon>;)",
    re.DOTALL,
)

KEYWORDS = frozenset({"if", "then", "else", "let", "in", "map", "to"})


def _classify_word(word: str) -> tuple[str, str]:
    if word in KEYWORDS:
        return "keyword", word
    if word in ("true", "false"):
        return "bool", word
    if word == "empty":
        return "empty", word
    if PrimFun.from_name(word) is not None:
        return "prim", word
    if word.endswith("?"):
        raise JamSyntaxError(f"Unknown primitive {word!r}")
    return "id", word


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        if source.startswith("/*", pos) and source.find("*/", pos + 2) < 0:
            raise JamSyntaxError(f"Unterminated block comment at {pos}")
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise JamSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind in ("comment", "ml_comment"):
            continue
        if kind == "word":
            yield _classify_word(m.group(kind))
        else:
            yield kind, m.group(kind)
