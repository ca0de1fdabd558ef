from timeit import timeit

from jolisp.interpreter import Interpreter
from jolisp.types.symbol import Symbol
from jolisp.types.context import Context

# Parse once so only evaluation is measured
from jolisp.reader.parser import parse, parse_all
from jolisp.evaluation.evaluator import evaluate


def time_interpreter(code: str, rounds: int) -> float:
    """Time evaluation of the last form in `code`. Earlier forms (definitions)
    run once as setup.
    """
    itp = Interpreter()
    *setup, expr = parse_all(code)
    for form in setup:
        evaluate(form, itp.context)
    # Warmup
    evaluate(expr, itp.context)
    # Timed
    return timeit(lambda: evaluate(expr, itp.context), number=rounds)


# Context lookup through a deep parent chain

def bench_lookup_chain(n_contexts: int = 1000, n_lookups: int = 10000) -> float:
    root = Context()
    key = Symbol("answer")
    root.define(key, 42)
    ctx = root
    for _ in range(n_contexts):
        ctx = Context(ctx)
    # Warmup
    for _ in range(1000):
        ctx.resolve(key)
    return timeit(lambda: ctx.resolve(key), number=n_lookups)


# Call-site fallback: every application Context has two parents

def bench_nested_application(depth: int = 40, rounds: int = 500) -> float:
    code = r"""
    (def down (fn (n) (if (= n 0) 0 (down (+ n -1)))))
    (down %d)
    """ % depth
    return time_interpreter(code, rounds)


FN_APPLY_CODE = "((fn (x y) (+ x y)) 1 2)"

FACTORIAL_CODE = r"""
(def fact (fn (n) (if (<= n 1) 1 (* n (fact (+ n -1))))))
(fact 30)
"""

MACRO_CODE = r"""
(defmacro unless (c b) (if (eval c) nil (eval b)))
(let (x 1 y 2) (unless (> x y) (+ x y)))
"""

PARSE_CODE = "(let (x 1 y (+ x 10)) (if (> y x) (* x y) (quote (a b c))))"


if __name__ == "__main__":
    print("Benchmark: context lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")
    print("Benchmark: parse only")
    print(f"  time: {timeit(lambda: parse(PARSE_CODE), number=20000):.6f}s  [rounds=20000]")

    for name, code, rounds in [
        ("fn application", FN_APPLY_CODE, 20000),
        ("recursion (factorial 30)", FACTORIAL_CODE, 500),
        ("macro expansion", MACRO_CODE, 5000),
    ]:
        print(f"Benchmark: {name}")
        print(f"  interpreter: {time_interpreter(code, rounds):.6f}s  [rounds={rounds}]")

    print("Benchmark: nested application (depth 40)")
    print(f"  time: {bench_nested_application():.6f}s")
