"""AST analyzers for codebase model construction."""

from layercheck.infrastructure.analyzers.base import (
    collect_bindings,
    compute_module_name,
    dotted_name,
    make_location,
    resolve_relative_import,
    shallow_walk,
)
from layercheck.infrastructure.analyzers.import_analyzer import ImportAnalyzer
from layercheck.infrastructure.analyzers.reference_analyzer import ReferenceAnalyzer

__all__ = [
    "ImportAnalyzer",
    "ReferenceAnalyzer",
    "collect_bindings",
    "compute_module_name",
    "dotted_name",
    "make_location",
    "resolve_relative_import",
    "shallow_walk",
]
