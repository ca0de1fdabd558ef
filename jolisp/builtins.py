from __future__ import annotations
import operator
from typing import Any, Callable
from jolisp.types.context import Context
from jolisp.types.symbol import Symbol
from jolisp.errors import JoTypeError, JoArityError

# Builtins are plain Python callables: fn(context, args) -> value.
# `args` are already evaluated, left to right.

# -------------------------------
# Arithmetic
# -------------------------------
def add(context: Context, args: list[Any]) -> Any:
    result = 0
    try:
        for x in args:
            result += x
        return result
    except TypeError as e:
        raise JoTypeError("All arguments to + must be numbers") from e

def mul(context: Context, args: list[Any]) -> Any:
    result = 1
    try:
        for x in args:
            result *= x
        return result
    except TypeError as e:
        raise JoTypeError("All arguments to * must be numbers") from e

# -------------------------------
# Comparison
# -------------------------------
COMPARISONS: dict[str, Callable[[Any, Any], bool]] = {
    '>=': operator.ge,
    '>': operator.gt,
    '=': operator.eq,
    '<': operator.lt,
    '<=': operator.le,
}

def compare(op: str, args: list[Any]) -> bool:
    """Chained comparison: true iff every adjacent pair satisfies `op`.

    Stops at the first failing pair. One argument is vacuously true.
    """
    if not args:
        raise JoArityError(f"{op} requires at least 1 argument")
    pred = COMPARISONS[op]
    try:
        for a, b in zip(args, args[1:]):
            if not pred(a, b):
                return False
    except TypeError as e:
        raise JoTypeError(f"Cannot compare arguments to {op}: {args!r}") from e
    return True

def comparison(op: str) -> Callable[[Context, list[Any]], bool]:
    def builtin(context: Context, args: list[Any]) -> bool:
        return compare(op, args)
    builtin.__name__ = f"compare{op}"
    return builtin

# -------------------------------
# Registration
# -------------------------------
STANDARD_BINDINGS: dict[Symbol, Callable[[Context, list[Any]], Any]] = {
    Symbol('+'): add,
    Symbol('*'): mul,
    **{Symbol(op): comparison(op) for op in COMPARISONS},
}

def register(context: Context) -> None:
    context.update(STANDARD_BINDINGS)
