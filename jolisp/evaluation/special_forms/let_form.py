from jolisp import EvaluatorFn
from jolisp import SExpression, LispValue
from jolisp.errors import JoArityError, JoInvalidSymbol, JoTypeError
from jolisp.types.context import Context
from jolisp.types.nil import Nil
from jolisp.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    context: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (let (name expr name expr ...) body...)
    Bindings are sequential: each expression already sees the names bound
    before it. The value is that of the last body form, or nil.
    """
    if not tail:
        raise JoArityError("let requires a binding list")

    bindings, *body = tail
    if not isinstance(bindings, list):
        raise JoTypeError(f"let bindings must be a list, got {bindings!r}")
    if len(bindings) % 2 != 0:
        raise JoArityError(f"let bindings must come in pairs, got {len(bindings)} form(s)")

    let_context = Context(context)
    for name, expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise JoInvalidSymbol(f"Cannot let-bind {name!r}: not a symbol")
        let_context.define(name, evaluate_fn(expr, let_context, depth + 1))

    result: LispValue = Nil
    for form in body:
        result = evaluate_fn(form, let_context, depth + 1)
    return result
