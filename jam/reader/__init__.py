"""Jam reader: lexer, parser and context-sensitive checker."""

from jam.reader.checker import check
from jam.reader.lexer import lex
from jam.reader.parser import TokenStream, parse


def parse_and_check(source: str):
    """Parse Jam source text and run the checker over the result."""
    return check(parse(source))


__all__ = ["lex", "TokenStream", "parse", "check", "parse_and_check"]
