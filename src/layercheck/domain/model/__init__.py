"""Domain model entities."""

from layercheck.domain.model.check_result import CheckResult, RuleResult
from layercheck.domain.model.codebase import CodebaseModel
from layercheck.domain.model.configuration import DEFAULT_EXCLUDES, CheckConfig
from layercheck.domain.model.enums import UnitKind
from layercheck.domain.model.location import Location
from layercheck.domain.model.rule import Rule
from layercheck.domain.model.symbol_table import SymbolTable
from layercheck.domain.model.unit import Unit
from layercheck.domain.model.violation import Violation

__all__ = [
    # Enums
    "UnitKind",
    # Value objects
    "Location",
    # Entities
    "Unit",
    "CodebaseModel",
    "SymbolTable",
    # Rules
    "Rule",
    "Violation",
    "RuleResult",
    "CheckResult",
    # Configuration
    "CheckConfig",
    "DEFAULT_EXCLUDES",
]
