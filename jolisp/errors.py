from __future__ import annotations

from typing import Any, Optional


class JoError(Exception):
    """ Base class for all jolisp errors"""
    pass


class JoSyntaxError(JoError):
    """ Raised when source text cannot be lexed or parsed"""

    def __init__(self, message: str, offset: Optional[int] = None, source: Optional[str] = None):
        if offset is not None:
            message = f"{message} at offset {offset}"
        super().__init__(message)
        self.offset = offset
        self.source = source


class JoEvaluationError(JoError):
    """ Base class for errors raised while evaluating a form"""
    pass


class JoUnboundSymbol(JoEvaluationError):
    """ Raised when a symbol is resolved before it is bound"""

    def __init__(self, name: Any, context: Any = None):
        super().__init__(f"Cannot resolve unbound symbol {name}")
        self.name = name
        # The Context the search started from
        self.context = context


class JoInvalidCallable(JoEvaluationError):
    """ Raised when the head of a list form is not a function or a macro"""

    def __init__(self, value: Any, form: Any = None):
        super().__init__(f"Invalid callable value {value!r} in form {form!r}")
        self.value = value
        self.form = form


class JoInvalidSymbol(JoEvaluationError):
    """ Raised when a name that must be a symbol is not one"""


class JoArityError(JoEvaluationError):
    """ Raised when a form or function receives the wrong number of arguments"""


class JoTypeError(JoEvaluationError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class JoRecursionError(JoEvaluationError):
    """ Raised when evaluation nests deeper than the configured maximum"""

    def __init__(self, message: str, depth: Optional[int] = None, limit: Optional[int] = None):
        super().__init__(message)
        self.depth = depth
        self.limit = limit
