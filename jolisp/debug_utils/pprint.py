"""Printing and re-embedding of jolisp values.

- to_source: render a value as text the reader accepts again.
- to_syntax: turn a runtime value back into Syntax a host can splice into
  another form.
- pprint_expr: indented, optionally colored multi-line view for debugging.
"""

import json
from typing import Optional

from jolisp import LispValue, SExpression
from jolisp.errors import JoTypeError
from jolisp.types.function import Function, Macro
from jolisp.types.keyword import Keyword
from jolisp.types.nil import NilType
from jolisp.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_KEYWORD = "\033[96m"
COLOR_FUNCTION = "\033[92m"
COLOR_MACRO = "\033[93m"
COLOR_PY_CALLABLE = "\033[95m"
COLOR_SPECIAL_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 5,
    "color_symbols": True,
    "color_keywords": True,
    "color_functions": True,
    "color_macros": True,
    "color_callables": True,
    "color_special_forms": True,
}

PLAIN_OPTIONS = {
    **DEFAULT_OPTIONS,
    **{k: False for k in DEFAULT_OPTIONS if k.startswith("color_")},
}

SPECIAL_FORMS = {"def", "defmacro", "fn", "if", "let", "quote", "eval"}


# ----------------- Source rendering -----------------
def to_source(value: LispValue) -> str:
    """Render `value` as jolisp source text."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, (int, Symbol, Keyword)):
        return str(value)
    if isinstance(value, list):
        return "(" + " ".join(to_source(x) for x in value) + ")"
    if isinstance(value, (Function, Macro)):
        return str(value)
    if callable(value):
        return f"#<builtin {getattr(value, '__name__', repr(value))}>"
    return repr(value)


def to_syntax(value: LispValue) -> SExpression:
    """Re-embed a runtime value as Syntax.

    A Function becomes its (fn (params) body) form; its captured Context is not
    representable and is dropped. A Macro becomes (macro (params) body), which
    reads back as data only. Python callables have no syntax and raise
    JoTypeError.
    """
    if isinstance(value, Function):
        return [Symbol("fn"), list(value.params), value.body]
    if isinstance(value, Macro):
        return [Symbol("macro"), list(value.params), value.body]
    if isinstance(value, list):
        return [to_syntax(x) for x in value]
    if callable(value):
        raise JoTypeError(f"Cannot embed builtin {value!r} as syntax")
    return value


# ----------------- Colorize utility -----------------
def colorize(obj, options: dict = DEFAULT_OPTIONS) -> str:
    text = to_source(obj)
    if isinstance(obj, Symbol):
        if str(obj) in SPECIAL_FORMS and options.get("color_special_forms", True):
            return f"{COLOR_SPECIAL_FORM}{text}{RESET}"
        if options.get("color_symbols", True):
            return f"{COLOR_SYMBOL}{text}{RESET}"
    elif isinstance(obj, Keyword) and options.get("color_keywords", True):
        return f"{COLOR_KEYWORD}{text}{RESET}"
    elif isinstance(obj, Function) and options.get("color_functions", True):
        return f"{COLOR_FUNCTION}{text}{RESET}"
    elif isinstance(obj, Macro) and options.get("color_macros", True):
        return f"{COLOR_MACRO}{text}{RESET}"
    elif callable(obj) and options.get("color_callables", True):
        return f"{COLOR_PY_CALLABLE}{text}{RESET}"
    return text


# ----------------- Pretty printer -----------------
def pprint_expr(
    expr: SExpression,
    indent: int = 0,
    options: Optional[dict] = None,
    _current_depth: int = 0,
) -> str:
    if options is None:
        options = DEFAULT_OPTIONS

    if _current_depth >= options.get("max_depth", 5):
        return "…"

    if not isinstance(expr, list):
        return colorize(expr, options)

    if not expr:
        return "()"

    parts = [pprint_expr(e, indent + 1, options, _current_depth + 1) for e in expr]

    single_line = "(" + " ".join(parts) + ")"
    if len(single_line) + indent * 2 <= options.get("max_line_length", 80):
        return single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += ")"
    return "\n".join(aligned_lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}
