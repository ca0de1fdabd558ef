# Core type aliases for jolisp's data model.
# Plain Python values represent both code (forms) and runtime values:
# int, bool, the Nil singleton, Symbol, Keyword and list. Runtime-only values
# are Function, Macro and Python callables (primitives).
#
# Naming guidance:
# - SExpression: reader/parser/macro code, syntactic forms (code-as-data).
# - LispValue:  evaluator/runtime code, evaluated values.
# Both aliases resolve to `Any` and are interchangeable: `quote` hands syntax
# to the runtime unchanged and `eval` runs a value as syntax again.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = LispValue

# Evaluator function type: passed into special forms and the application engine
EvaluatorFn = Callable[..., LispValue]
