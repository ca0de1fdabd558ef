"""
  Recursive-descent parser for jolisp.

Emits Python primitives instead of Cons cells:

    - integers -> int
    - true / false -> bool
    - nil -> Nil
    - :name -> Keyword("name")
    - symbols -> Symbol
    - lists -> Python list
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from jolisp import SExpression
from jolisp.errors import JoSyntaxError
from jolisp.reader.lexer import (
    BOOLEAN,
    INTEGER,
    KEYWORD,
    LPAREN,
    NIL,
    RPAREN,
    SYMBOL,
    WHITESPACE,
    Token,
    tokenize,
)
from jolisp.types.keyword import Keyword
from jolisp.types.nil import Nil
from jolisp.types.symbol import Symbol


class TokenStream:
    """Token iterator with a pushback buffer.

    A pushed-back token is yielded again before the underlying stream
    continues; the list loop relies on this to hand an inspected token to a
    sub-parse.
    """

    def __init__(self, tokens: Iterable[Token], source: str = ""):
        self.tokens: Iterator[Token] = iter(tokens)
        self.buffer: list[Token] = []
        self.source = source

    def __iter__(self) -> TokenStream:
        return self

    def __next__(self) -> Token:
        if self.buffer:
            return self.buffer.pop()
        return next(self.tokens)

    def push_back(self, token: Token) -> None:
        self.buffer.append(token)

    def next_significant(self) -> Optional[Token]:
        """Next non-whitespace token, or None when the stream is exhausted."""
        for token in self:
            if token.kind != WHITESPACE:
                return token
        return None

    def at_end(self) -> bool:
        token = self.next_significant()
        if token is None:
            return True
        self.push_back(token)
        return False

    def error(self, message: str, offset: Optional[int] = None) -> JoSyntaxError:
        if offset is None:
            offset = len(self.source)
        return JoSyntaxError(message, offset, self.source)


def parse_list_form(tokens: TokenStream, opening: Token) -> list[SExpression]:
    items: list[SExpression] = []
    while True:
        token = tokens.next_significant()
        if token is None:
            raise tokens.error("Invalid list form: did not terminate", opening.offset)
        if token.kind == RPAREN:
            return items
        tokens.push_back(token)
        items.append(parse_form(tokens))


def parse_form(tokens: TokenStream) -> SExpression:
    """Consume exactly the tokens of one form and return its syntax."""
    token = tokens.next_significant()
    if token is None:
        raise tokens.error("No tokens to compile for form")

    kind, text, offset = token
    if kind == INTEGER:
        return int(text)
    if kind == BOOLEAN:
        return text == "true"
    if kind == NIL:
        return Nil
    if kind == KEYWORD:
        return Keyword(text[1:])
    if kind == SYMBOL:
        return Symbol(text)
    if kind == LPAREN:
        return parse_list_form(tokens, token)
    raise tokens.error(f"Unexpected token {text!r}", offset)


def parse(source: str) -> SExpression:
    """Parse the first form in `source`; any trailing tokens are ignored."""
    try:
        return parse_form(TokenStream(tokenize(source), source))
    except RecursionError as e:
        raise JoSyntaxError("Form nested too deeply", len(source) - len(source.lstrip()), source) from e


def parse_all(source: str) -> list[SExpression]:
    """Parse every top-level form in `source`, in order.

    The whole source is parsed before anything is returned, so a syntax error
    anywhere means no form is handed to the evaluator.
    """
    stream = TokenStream(tokenize(source), source)
    forms: list[SExpression] = []
    while not stream.at_end():
        # at_end() pushed the form's first token back
        start = stream.buffer[-1].offset
        try:
            forms.append(parse_form(stream))
        except RecursionError as e:
            raise JoSyntaxError("Form nested too deeply", start, source) from e
    return forms
