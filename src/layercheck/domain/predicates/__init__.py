"""Domain predicates: selectors, constraints and package patterns."""

from layercheck.domain.predicates.base import UnitConstraint, UnitSelector
from layercheck.domain.predicates.constraints import (
    not_reference_package,
    only_reference_package,
    reside_in_package,
)
from layercheck.domain.predicates.patterns import (
    CompiledPattern,
    compile_pattern,
    matches_any,
)
from layercheck.domain.predicates.selectors import (
    all_of,
    has_simple_name_ending_with,
    has_simple_name_matching,
    is_class,
    is_module,
    resides_in_package,
)

__all__ = [
    # Type aliases
    "UnitSelector",
    "UnitConstraint",
    # Patterns
    "CompiledPattern",
    "compile_pattern",
    "matches_any",
    # Selectors
    "has_simple_name_ending_with",
    "has_simple_name_matching",
    "resides_in_package",
    "is_class",
    "is_module",
    "all_of",
    # Constraints
    "reside_in_package",
    "not_reference_package",
    "only_reference_package",
]
