from jolisp.types.nil import Nil, NilType
from jolisp.types.symbol import Symbol
from jolisp.types.keyword import Keyword
from jolisp.types.context import Context
from jolisp.types.function import Function, Macro

__all__ = ["Nil", "NilType", "Symbol", "Keyword", "Context", "Function", "Macro"]
