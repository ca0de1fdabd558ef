from jolisp.reader.lexer import Token, lex, tokenize
from jolisp.reader.parser import TokenStream, parse, parse_all, parse_form

__all__ = ["Token", "lex", "tokenize", "TokenStream", "parse", "parse_all", "parse_form"]
