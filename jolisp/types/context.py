"""Runtime environment ("Context") for jolisp.

A Context stores bindings of Symbols to evaluated Lisp values and links to
zero or more parent Contexts. Lookup searches the Context itself, then each
parent in declared order, depth-first; the first hit wins. Function
application builds a Context whose parents are the function's defining
Context followed by the caller's Context, so free variables resolve
lexically first and fall back to the call site.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Union

from jolisp import LispValue
from jolisp.errors import JoArityError, JoInvalidSymbol, JoUnboundSymbol
from jolisp.types.symbol import Symbol

Name = Union[Symbol, str]


def as_symbol(name: Name) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise JoInvalidSymbol(f"Cannot bind {name!r} as a symbol")


class Context:
    """Multi-parent mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "parents")

    def __init__(self, *parents: Context):
        self.vars: dict[Symbol, LispValue] = {}
        # Fixed at construction: a Context can never become its own ancestor
        self.parents: tuple[Context, ...] = parents

    def define(self, name: Name, value: LispValue) -> None:
        """Bind `name` to `value` in this Context, overwriting any prior binding.

        Parents are never modified. Raises JoInvalidSymbol if `name` is neither
        a Symbol nor a str.
        """
        self.vars[as_symbol(name)] = value

    def define_all(self, names: Sequence[Name], values: Sequence[LispValue]) -> None:
        """Positionally bind `names` to `values`.

        Raises JoArityError when the two sequences differ in length; nothing is
        bound in that case.
        """
        if len(names) != len(values):
            raise JoArityError(
                f"Expected {len(names)} argument(s) for ({' '.join(str(n) for n in names)}), "
                f"got {len(values)}"
            )
        for name, value in zip(names, values):
            self.define(name, value)

    def update(self, mapping: Mapping[Name, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in this Context."""
        for k, v in mapping.items():
            self.define(k, v)

    def _chain(self) -> Iterator[Context]:
        # Depth-first, parents left to right. A Context reachable along two
        # paths is only visited once; its second visit could not find anything new.
        seen: set[int] = set()
        stack: list[Context] = [self]
        while stack:
            ctx = stack.pop()
            if id(ctx) in seen:
                continue
            seen.add(id(ctx))
            yield ctx
            stack.extend(reversed(ctx.parents))

    def find(self, name: Name) -> Optional[Context]:
        """Find the first Context in search order that binds `name`."""
        symbol = as_symbol(name)
        for ctx in self._chain():
            if symbol in ctx.vars:
                return ctx
        return None

    def resolve(self, name: Name) -> LispValue:
        """Look up the value bound to `name`.

        Raises JoUnboundSymbol, carrying the name and this Context, if no
        Context in the chain binds it.
        """
        symbol = as_symbol(name)
        ctx = self.find(symbol)
        if ctx is None:
            raise JoUnboundSymbol(symbol, self)
        return ctx.vars[symbol]

    def __contains__(self, name: Name) -> bool:
        return self.find(name) is not None

    def names(self) -> Iterable[Symbol]:
        """Names bound directly in this Context (parents excluded)."""
        return self.vars.keys()

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this Context's own bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parents:
                buffer.write(f" -> ({len(self.parents)} parent(s))")
            return buffer.getvalue()

    def __repr__(self) -> str:
        # Own bindings only; the parent graph can be large and shared
        return f"<Context {len(self.vars)} binding(s), {len(self.parents)} parent(s)>"
