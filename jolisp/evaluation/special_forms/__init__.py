"""Registry of special forms for the jolisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so a
special-form name cannot be rebound as a callable.

Every handler has the signature
    handler(tail, context, evaluate_fn, depth) -> LispValue
where `tail` holds the unevaluated forms following the head symbol.
"""

from jolisp.types.symbol import Symbol
from jolisp.evaluation.special_forms.define_form import define_form
from jolisp.evaluation.special_forms.defmacro_form import defmacro_form
from jolisp.evaluation.special_forms.fn_form import fn_form
from jolisp.evaluation.special_forms.if_form import if_form
from jolisp.evaluation.special_forms.let_form import let_form
from jolisp.evaluation.special_forms.quote_form import quote_form
from jolisp.evaluation.special_forms.eval_form import eval_form

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("defmacro"): defmacro_form,
    Symbol("fn"): fn_form,
    Symbol("if"): if_form,
    Symbol("let"): let_form,
    Symbol("quote"): quote_form,
    Symbol("eval"): eval_form,
}
