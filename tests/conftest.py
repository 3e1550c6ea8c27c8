import pytest

from rinha.evaluation.evaluator import evaluate
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment


@pytest.fixture
def runtime():
    """Default settings: fast path on, matrix threshold 1000, print to sys.stdout."""
    return Runtime(fib_fast_path=True, fib_matrix_threshold=1000)


@pytest.fixture
def run(runtime):
    """Evaluate a term from a fresh top-level environment."""
    def _run(term):
        return evaluate(term, Environment(), runtime)
    return _run
