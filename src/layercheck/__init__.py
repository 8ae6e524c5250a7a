"""layercheck - layering conventions checker for Python codebases."""

__version__ = "0.1.0"

from layercheck.application.rules import LAYERING_RULES
from layercheck.application.services import LayerChecker, assert_check, evaluate_all
from layercheck.domain.exceptions import LayeringViolationError, LoadError
from layercheck.infrastructure.adapters.ast_loader import load_model
from layercheck.presentation.api.dsl import LayerCheck

__all__ = [
    "LAYERING_RULES",
    "LayerCheck",
    "LayerChecker",
    "LayeringViolationError",
    "LoadError",
    "__version__",
    "assert_check",
    "evaluate_all",
    "load_model",
]
