"""Predicate type aliases."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.codebase import CodebaseModel
    from layercheck.domain.model.unit import Unit

# Selector: does the rule apply to this unit?
UnitSelector = Callable[["Unit"], bool]

# Constraint: reason the unit fails, None if it holds
UnitConstraint = Callable[["Unit", "CodebaseModel"], "str | None"]
