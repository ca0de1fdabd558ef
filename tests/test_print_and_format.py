import pytest

from jolisp.builtins import add
from jolisp.debug_utils.pprint import (
    COLOR_SPECIAL_FORM,
    COLOR_SYMBOL,
    DEFAULT_OPTIONS,
    PLAIN_OPTIONS,
    colorize,
    load_options_from_json,
    pprint_expr,
    to_source,
    to_syntax,
)
from jolisp.errors import JoTypeError
from jolisp.reader.parser import parse
from jolisp.types.keyword import Keyword
from jolisp.types.nil import Nil
from jolisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        (-7, "-7"),
        (True, "true"),
        (False, "false"),
        (Nil, "nil"),
        (Symbol("foo"), "foo"),
        (Keyword("k"), ":k"),
        ([], "()"),
        ([Symbol("+"), 1, [Symbol("quote"), Symbol("x")]], "(+ 1 (quote x))"),
    ]
)
def test_to_source(value, expected):
    assert to_source(value) == expected


def test_source_reads_back():
    source = "(let (x 1 y :k) (if nil true (f x y)))"
    assert to_source(parse(source)) == source


def test_functions_and_macros_print_as_source(run):
    f = run("(fn (x y) (+ x y))")
    assert str(f) == "(fn (x y) (+ x y))"
    run("(defmacro w (c b) (if (eval c) (eval b) nil))")
    assert str(run("w")) == "(macro (c b) (if (eval c) (eval b) nil))"
    assert to_source(add) == "#<builtin add>"


def test_to_syntax_reembeds_functions(run):
    f = run("(fn (x) (+ x 1))")
    syntax = to_syntax(f)
    assert syntax == [Symbol("fn"), [Symbol("x")], [Symbol("+"), Symbol("x"), 1]]
    # The re-embedded form evaluates to an equivalent function
    g = run("(fn (x) x)")
    assert run(to_source([to_syntax(g), 5])) == 5


def test_to_syntax_leaves_plain_data_alone():
    data = [Symbol("a"), 1, Nil, Keyword("k"), [True]]
    assert to_syntax(data) == data


def test_to_syntax_rejects_builtins():
    with pytest.raises(JoTypeError):
        to_syntax(add)


def test_pprint_short_form_on_one_line():
    assert pprint_expr(parse("(+ 1 2)"), options=PLAIN_OPTIONS) == "(+ 1 2)"


def test_pprint_wraps_long_forms():
    expr = parse("(def a-rather-long-name (fn (first-argument second-argument) (+ first-argument second-argument)))")
    opts = {**PLAIN_OPTIONS, "max_line_length": 40}
    lines = pprint_expr(expr, options=opts).split("\n")
    assert len(lines) > 1
    assert lines[0] == "(def"
    assert lines[-1].endswith(")")


def test_pprint_depth_limit():
    expr = parse("(a (b (c (d))))")
    opts = {**PLAIN_OPTIONS, "max_depth": 2}
    assert pprint_expr(expr, options=opts) == "(a (… …))"


def test_colorize():
    assert colorize(Symbol("x")) == f"{COLOR_SYMBOL}x\033[0m"
    assert colorize(Symbol("let")) == f"{COLOR_SPECIAL_FORM}let\033[0m"
    assert colorize(Symbol("x"), PLAIN_OPTIONS) == "x"
    assert colorize(3) == "3"


def test_load_options_from_json():
    opts = load_options_from_json('{"max_line_length": 50}')
    assert opts["max_line_length"] == 50
    assert opts["max_depth"] == DEFAULT_OPTIONS["max_depth"]
    assert load_options_from_json("not json") == DEFAULT_OPTIONS
