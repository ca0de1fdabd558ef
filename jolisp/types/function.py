"""Function and Macro representations for jolisp."""

from __future__ import annotations

from io import StringIO

from jolisp import SExpression
from jolisp.types.context import Context
from jolisp.types.symbol import Symbol


def _write_signature(buffer: StringIO, head: str, params: list[Symbol], body: SExpression) -> None:
    # Imported lazily: the printer depends on this module
    from jolisp.debug_utils.pprint import to_source

    buffer.write(f"({head} (")
    buffer.write(" ".join(str(p) for p in params))
    buffer.write(") ")
    buffer.write(to_source(body))
    buffer.write(")")


class Function:
    """A first-class function with parameters, a single body form, and the
    Context it was created in."""

    __slots__ = ("params", "body", "context")

    def __init__(self, params: list[Symbol], body: SExpression, context: Context):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.context: Context = context

    def extend_context(self, args: list, caller: Context) -> Context:
        """Bind evaluated `args` to the parameters in a fresh application Context.

        The defining Context is searched before the caller's.
        """
        application = Context(self.context, caller)
        application.define_all(self.params, args)
        return application

    def __str__(self) -> str:
        with StringIO() as buffer:
            _write_signature(buffer, "fn", self.params, self.body)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class Macro:
    """A transformer whose arguments arrive unevaluated.

    Macros capture no Context: the body runs in a Context derived from the
    call site.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[Symbol], body: SExpression):
        self.params: list[Symbol] = params
        self.body: SExpression = body

    def extend_context(self, args: list[SExpression], caller: Context) -> Context:
        """Bind raw argument syntax to the parameters in an expansion Context."""
        expansion = Context(caller)
        expansion.define_all(self.params, args)
        return expansion

    def __str__(self) -> str:
        with StringIO() as buffer:
            _write_signature(buffer, "macro", self.params, self.body)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
