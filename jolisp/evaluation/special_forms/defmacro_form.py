"""Special form: defmacro.

Binds a Macro in the current Context. The body is stored unevaluated and no
Context is captured.
"""

from __future__ import annotations

from jolisp import EvaluatorFn, SExpression, LispValue
from jolisp.errors import JoArityError, JoInvalidSymbol
from jolisp.evaluation.special_forms.fn_form import parameter_list
from jolisp.types.context import Context
from jolisp.types.function import Macro
from jolisp.types.nil import Nil
from jolisp.types.symbol import Symbol


def defmacro_form(
    tail: list[SExpression],
    context: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """Register a macro named by the first argument with params/body in tail."""
    if len(tail) != 3:
        raise JoArityError("defmacro requires a name, a parameter list and a body")

    macro_name, params, body = tail
    if not isinstance(macro_name, Symbol):
        raise JoInvalidSymbol(f"Macro name must be a Symbol, got {macro_name!r}")

    context.define(macro_name, Macro(parameter_list(params, "defmacro"), body))
    return Nil
