"""
  Lexer for jolisp source text.

Token kinds are tried in a fixed priority order at every offset and the first
pattern that matches a non-empty prefix wins. Priority, not longest match:
`nil` must be tried before SYMBOL, so `nil?` lexes as NIL followed by
SYMBOL("?").

Whitespace is kept as WHITESPACE tokens; the parser discards them.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple

from jolisp.errors import JoSyntaxError

LPAREN = "LPAREN"
RPAREN = "RPAREN"
WHITESPACE = "WHITESPACE"
INTEGER = "INTEGER"
BOOLEAN = "BOOLEAN"
NIL = "NIL"
KEYWORD = "KEYWORD"
SYMBOL = "SYMBOL"

SYMBOL_PATTERN = r"[a-zA-Z\-_?!*+<>=/][a-zA-Z\-_?!*+<>=/0-9']*"

TOKEN_TYPES: list[tuple[str, re.Pattern[str]]] = [
    (name, re.compile(pattern))
    for name, pattern in (
        (LPAREN, r"\("),
        (RPAREN, r"\)"),
        (WHITESPACE, r"\s+"),
        (INTEGER, r"-?[0-9]+"),
        (BOOLEAN, r"true|false"),
        (NIL, r"nil"),
        (KEYWORD, rf":{SYMBOL_PATTERN}"),
        (SYMBOL, SYMBOL_PATTERN),
    )
]


class Token(NamedTuple):
    kind: str
    text: str
    offset: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens lazily, in source order."""
    pos = 0
    n = len(source)
    while pos < n:
        for kind, pattern in TOKEN_TYPES:
            m = pattern.match(source, pos)
            if m and m.end() > pos:
                yield Token(kind, m.group(), pos)
                pos = m.end()
                break
        else:
            raise JoSyntaxError(f"Invalid syntax {source[pos]!r}", pos, source)


def tokenize(source: str) -> list[Token]:
    """Convert `source` into its full, ordered token list."""
    return list(lex(source))
