from jolisp import EvaluatorFn
from jolisp import SExpression, LispValue
from jolisp.errors import JoArityError
from jolisp.types.context import Context


def eval_form(
    tail: list[SExpression],
    context: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    # Evaluate the argument, then run the resulting value as code in the
    # current Context (not the one the data was quoted in).
    if len(tail) != 1:
        raise JoArityError("eval expects exactly one argument")
    form = evaluate_fn(tail[0], context, depth + 1)
    return evaluate_fn(form, context, depth + 1)
