from rinha.evaluation.evaluator import evaluate
from rinha.evaluation.runtime import Runtime

__all__ = ["evaluate", "Runtime"]
