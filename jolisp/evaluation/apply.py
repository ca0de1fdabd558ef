"""Application engine for jolisp.

Centralizes what happens once the head of a list form has been evaluated:
- Function: arguments are evaluated eagerly, left to right, in the caller's
  Context; the body runs in a Context whose parents are the defining Context
  and then the caller's Context.
- Macro: arguments are bound unevaluated; the body runs immediately in a
  Context whose only parent is the caller's Context (no hygiene).
- Python callables (builtins, host functions): invoked with the caller's
  Context and the evaluated arguments.
"""

from __future__ import annotations

from typing import Optional

from jolisp import EvaluatorFn, LispValue, SExpression
from jolisp.errors import JoInvalidCallable
from jolisp.types.context import Context
from jolisp.types.function import Function, Macro


def evaluate_args(
    arg_forms: list[SExpression], context: Context, evaluate_fn: EvaluatorFn, depth: int
) -> list[LispValue]:
    return [evaluate_fn(arg, context, depth + 1) for arg in arg_forms]


def apply_function(
    fn: Function,
    arg_forms: list[SExpression],
    caller: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    args = evaluate_args(arg_forms, caller, evaluate_fn, depth)
    application = fn.extend_context(args, caller)
    return evaluate_fn(fn.body, application, depth + 1)


def expand_macro(
    macro: Macro,
    arg_forms: list[SExpression],
    caller: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    expansion = macro.extend_context(list(arg_forms), caller)
    return evaluate_fn(macro.body, expansion, depth + 1)


def apply(
    head: LispValue,
    arg_forms: list[SExpression],
    caller: Context,
    evaluate_fn: EvaluatorFn,
    depth: int,
    form: Optional[SExpression] = None,
) -> LispValue:
    """Apply an evaluated head to the unevaluated argument forms of `form`.

    Raises JoInvalidCallable when `head` is neither a Function, a Macro nor a
    Python callable.
    """
    if isinstance(head, Function):
        return apply_function(head, arg_forms, caller, evaluate_fn, depth)
    if isinstance(head, Macro):
        return expand_macro(head, arg_forms, caller, evaluate_fn, depth)
    if callable(head):
        return head(caller, evaluate_args(arg_forms, caller, evaluate_fn, depth))
    raise JoInvalidCallable(head, form)
