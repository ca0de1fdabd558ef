import pytest

from jolisp.errors import JoArityError, JoInvalidSymbol, JoTypeError, JoUnboundSymbol
from jolisp.types.function import Macro
from jolisp.types.nil import Nil
from jolisp.types.symbol import Symbol


def test_defmacro_binds_macro_value(run, context):
    assert run("(defmacro w (c b) (if (eval c) (eval b) nil))") is Nil
    macro = context.resolve("w")
    assert isinstance(macro, Macro)
    assert macro.params == [Symbol("c"), Symbol("b")]
    # Body is stored unevaluated
    assert macro.body == [Symbol("if"), [Symbol("eval"), Symbol("c")], [Symbol("eval"), Symbol("b")], Nil]


def test_when_macro(run):
    run("(defmacro w (c b) (if (eval c) (eval b) nil))")
    assert run("(w true 23)") == 23
    assert run("(w false 23)") is Nil


def test_macro_arguments_are_not_evaluated(run):
    run("(defmacro ignore (a) 1)")
    assert run("(ignore (undefined-function 1 2))") == 1


def test_macro_receives_raw_syntax(run):
    run("(defmacro raw (a) a)")
    assert run("(raw (+ 1 2))") == [Symbol("+"), 1, 2]
    assert run("(raw x)") == Symbol("x")


def test_macro_arguments_evaluate_in_caller_context(run):
    run("(defmacro w (c b) (if (eval c) (eval b) nil))")
    assert run("(let (flag true v 9) (w flag v))") == 9


def test_branch_not_taken_is_never_evaluated(run):
    run("(defmacro w (c b) (if (eval c) (eval b) nil))")
    assert run("(w false (undefined-function))") is Nil


def test_macro_parameters_capture_caller_names(run):
    run("(defmacro m (x) (eval x))")
    assert run("(let (y 5) (m y))") == 5
    # The argument symbol x resolves to the macro's own parameter
    assert run("(let (x 5) (m x))") == Symbol("x")


def test_macro_definitions_in_body_land_in_expansion_context(run):
    run("(defmacro setq (name val) (def inner (eval val)))")
    run("(setq a 3)")
    with pytest.raises(JoUnboundSymbol):
        run("inner")


def test_macro_arity_is_checked(run):
    run("(defmacro one (a) a)")
    with pytest.raises(JoArityError):
        run("(one 1 2)")


@pytest.mark.parametrize(
    "source,error",
    [
        ("(defmacro m (a))", JoArityError),
        ("(defmacro 1 (a) a)", JoInvalidSymbol),
        ("(defmacro m a a)", JoTypeError),
        ("(defmacro m (1) a)", JoInvalidSymbol),
    ]
)
def test_defmacro_shape_errors(run, source, error):
    with pytest.raises(error):
        run(source)
