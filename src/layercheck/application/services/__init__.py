"""Application services for layering checks.

LayerChecker is the main facade; evaluate/evaluate_all are the pure core.
"""

from layercheck.application.services.checker import LayerChecker, assert_check
from layercheck.application.services.evaluator import evaluate, evaluate_all, evaluate_rule

__all__ = [
    "LayerChecker",
    "assert_check",
    "evaluate",
    "evaluate_rule",
    "evaluate_all",
]
