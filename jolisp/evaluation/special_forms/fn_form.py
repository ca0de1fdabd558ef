from jolisp import EvaluatorFn
from jolisp import SExpression, LispValue
from jolisp.errors import JoArityError, JoInvalidSymbol, JoTypeError
from jolisp.types.context import Context
from jolisp.types.function import Function
from jolisp.types.symbol import Symbol


def parameter_list(params: SExpression, form_name: str) -> list[Symbol]:
    """Validate a (param...) list, shared by fn and defmacro."""
    if not isinstance(params, list):
        raise JoTypeError(f"{form_name} parameter list must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise JoInvalidSymbol(f"{form_name} parameter must be a symbol, got {p!r}")
    return list(params)


def fn_form(
    tail: list[SExpression],
    context: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    # (fn (params) body): exactly one body expression. The current Context
    # becomes the function's defining Context.
    if len(tail) != 2:
        raise JoArityError("fn requires a parameter list and a single body form")

    params, body = tail
    return Function(parameter_list(params, "fn"), body, context)
