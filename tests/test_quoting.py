import pytest

from jolisp.errors import JoArityError, JoUnboundSymbol
from jolisp.types.keyword import Keyword
from jolisp.types.nil import Nil
from jolisp.types.symbol import Symbol


def test_quote_returns_syntax(run):
    assert run("(quote foo)") == Symbol("foo")
    assert run("(quote :k)") == Keyword("k")
    assert run("(quote (+ 1 2))") == [Symbol("+"), 1, 2]
    assert run("(quote ())") == []
    assert run("(quote nil)") is Nil


def test_quote_does_not_resolve(run):
    # foo is unbound: quoting must not look it up
    assert run("(quote (foo bar))") == [Symbol("foo"), Symbol("bar")]


def test_eval_round_trip(run):
    assert run("(eval (quote 2))") == 2
    assert run("(eval (quote (+ 1 2)))") == 3


def test_eval_resolves_in_current_context(run):
    run("(def q (quote x))")
    assert run("(let (x 1) (eval q))") == 1
    assert run("(let (x 2) (eval q))") == 2
    with pytest.raises(JoUnboundSymbol):
        run("(eval q)")


def test_eval_of_non_syntax_value(run):
    assert run("(eval 5)") == 5
    assert run("((eval (quote (fn (x) x))) 4)") == 4


def test_data_built_by_host_is_executable(run, context):
    context.define("code", [Symbol("+"), 20, 22])
    assert run("(eval code)") == 42


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)", "(eval)", "(eval 1 2)"])
def test_arity(run, source):
    with pytest.raises(JoArityError):
        run(source)
