"""Application layer for layering analysis.

Components:
- rules: Built-in rule sets (LAYERING_RULES)
- services: Evaluation core and main facade (LayerChecker)
- reporters: Output formatting (PlainText, JSON, Console)
"""

from layercheck.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JsonReporter,
    PlainTextReporter,
)
from layercheck.application.rules import LAYERING_RULES
from layercheck.application.services import (
    LayerChecker,
    assert_check,
    evaluate,
    evaluate_all,
    evaluate_rule,
)

__all__ = [
    # Rules
    "LAYERING_RULES",
    # Services
    "LayerChecker",
    "assert_check",
    "evaluate",
    "evaluate_rule",
    "evaluate_all",
    # Reporters
    "BaseReporter",
    "PlainTextReporter",
    "JsonReporter",
    "ConsoleReporter",
]
