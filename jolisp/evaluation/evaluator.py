"""Core tree-walking evaluator for jolisp.

Dispatches special forms through the SPECIAL_FORMS registry and hands every
other list form to the application engine. Each nested evaluation runs one
level deeper; exceeding the configured maximum depth aborts the whole
evaluation with JoRecursionError instead of exhausting the Python stack.
"""

from __future__ import annotations

import logging
from typing import Optional

from jolisp import EvaluatorFn, SExpression, LispValue
from jolisp.config import get_max_depth
from jolisp.errors import JoRecursionError
from jolisp.evaluation.apply import apply
from jolisp.evaluation.special_forms import SPECIAL_FORMS
from jolisp.types.context import Context
from jolisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, context: Context) -> LispValue:
    """
    Entry point: evaluate one outermost form in `context`.

    The depth limit is read once here and holds for the whole evaluation.
    """
    evaluate0 = make_stepper(get_max_depth())
    try:
        return evaluate0(expr, context, 0)
    except RecursionError as e:
        # Configured limit is above what the Python stack allows
        logger.debug("Python stack exhausted while evaluating %r", expr)
        raise JoRecursionError("Python stack exhausted during evaluation") from e


def make_stepper(limit: Optional[int]) -> EvaluatorFn:
    """Build the recursive step `evaluate0(expr, context, depth)` bound to `limit`."""

    def evaluate0(expr: SExpression, context: Context, depth: int) -> LispValue:
        if limit is not None and depth > limit:
            logger.debug("Evaluation depth limit %d exceeded", limit)
            raise JoRecursionError(f"Maximum evaluation depth {limit} exceeded", depth, limit)

        match expr:
            case Symbol():
                return context.resolve(expr)
            case []:
                return []
            case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, context, evaluate0, depth)
            case [head, *tail]:
                callee = evaluate0(head, context, depth + 1)
                return apply(callee, tail, context, evaluate0, depth, expr)

        # --- Atoms (integers, booleans, nil, keywords, runtime values) return as-is ---
        return expr

    return evaluate0
