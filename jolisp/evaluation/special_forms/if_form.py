from jolisp import EvaluatorFn
from jolisp import SExpression, LispValue
from jolisp.errors import JoArityError
from jolisp.types.context import Context
from jolisp.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    # Only false and nil are falsy; 0 and () are true
    return value is not False and value is not Nil


def if_form(
    tail: list[SExpression],
    context: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise JoArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], context, depth + 1)
    if is_truthy(cond):
        return evaluate_fn(tail[1], context, depth + 1)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], context, depth + 1)
    else:
        return Nil
