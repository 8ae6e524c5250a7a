"""layercheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, re, types, collections.abc
"""

from layercheck.domain.exceptions import (
    LayerCheckError,
    LayeringViolationError,
    LoadError,
    RuleDefinitionError,
)
from layercheck.domain.model import (
    CheckConfig,
    CheckResult,
    CodebaseModel,
    Location,
    Rule,
    RuleResult,
    Unit,
    UnitKind,
    Violation,
)

__all__ = [
    # Exceptions
    "LayerCheckError",
    "LoadError",
    "RuleDefinitionError",
    "LayeringViolationError",
    # Enums
    "UnitKind",
    # Value objects
    "Location",
    # Entities
    "Unit",
    "CodebaseModel",
    # Rules
    "Rule",
    "Violation",
    "RuleResult",
    "CheckResult",
    # Configuration
    "CheckConfig",
]
