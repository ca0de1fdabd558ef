import pytest

from jolisp.interpreter import Interpreter, build_standard_context
from jolisp.reader.parser import parse_all
from jolisp.evaluation.evaluator import evaluate


@pytest.fixture
def context():
    """Fresh standard Context (builtins only) for each test."""
    return build_standard_context()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(context):
    """Evaluate every form of a source string in the shared test Context and
    return the last value."""
    def _run(source: str):
        result = None
        for form in parse_all(source):
            result = evaluate(form, context)
        return result
    return _run
