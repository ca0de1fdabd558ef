from jolisp import EvaluatorFn
from jolisp import SExpression, LispValue
from jolisp.errors import JoArityError
from jolisp.types.context import Context


def quote_form(
    tail: list[SExpression], context: Context, evaluate_fn: EvaluatorFn, depth: int
) -> LispValue:
    if len(tail) != 1:
        raise JoArityError("quote expects exactly 1 argument")
    return tail[0]
