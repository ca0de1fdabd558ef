"""Embedding API for jolisp.

Hosts build a standard Context (builtins plus an optional seed map) and
evaluate source text against it, one form at a time or as a sequence.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from jolisp import LispValue
from jolisp.builtins import register
from jolisp.evaluation.evaluator import evaluate
from jolisp.reader.parser import parse, parse_all
from jolisp.types.context import Context, Name
from jolisp.types.nil import Nil

logger = logging.getLogger(__name__)


def build_context(
    root: Optional[Context] = None,
    bindings: Optional[Mapping[Name, LispValue]] = None,
) -> Context:
    """Define `bindings` into `root`, or into a new empty Context."""
    context = root if root is not None else Context()
    if bindings is not None:
        context.update(bindings)
    return context


def build_standard_context(bindings: Optional[Mapping[Name, LispValue]] = None) -> Context:
    """Root Context holding the builtins, merged with the caller's seed map.

    Seed bindings overwrite builtins of the same name.
    """
    context = Context()
    register(context)
    return build_context(context, bindings)


def eval_string(context: Context, source: str) -> LispValue:
    """Evaluate the first form of `source` in `context`."""
    form = parse(source)
    logger.debug("Evaluating %r", source)
    return evaluate(form, context)


def eval_all(context: Context, source: str) -> list[LispValue]:
    """Evaluate every top-level form of `source` in order.

    The source is parsed completely first; an error in a later form still
    leaves the effects (e.g. `def`s) of the forms evaluated before it.
    """
    forms = parse_all(source)
    logger.debug("Evaluating %d form(s)", len(forms))
    return [evaluate(form, context) for form in forms]


class Interpreter:
    """
    Keeps one standard Context across calls so definitions persist between
    evaluations.
    """

    def __init__(self, bindings: Optional[Mapping[Name, LispValue]] = None):
        self.context: Context = build_standard_context(bindings)

    def eval(self, code: str) -> LispValue:
        return eval_string(self.context, code)

    def eval_all(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the last value (nil if none)."""
        results = eval_all(self.context, code)
        return results[-1] if results else Nil
