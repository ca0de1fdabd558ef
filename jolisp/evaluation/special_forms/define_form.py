from jolisp import EvaluatorFn
from jolisp import SExpression, LispValue
from jolisp.errors import JoArityError, JoInvalidSymbol
from jolisp.types.context import Context
from jolisp.types.nil import Nil
from jolisp.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    context: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (def name value)
    Binds in the current Context only, never in a parent.
    """
    if len(tail) != 2:
        raise JoArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise JoInvalidSymbol(f"Cannot def {name!r}: not a symbol")
    value = evaluate_fn(val_expr, context, depth + 1)
    context.define(name, value)
    return Nil
