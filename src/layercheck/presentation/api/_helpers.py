"""Shared plumbing for UnitQuery and UnitAssertion. Not public API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.domain.predicates.selectors import all_of

if TYPE_CHECKING:
    from layercheck.domain.model.codebase import CodebaseModel
    from layercheck.domain.model.unit import Unit
    from layercheck.domain.predicates.base import UnitConstraint, UnitSelector


def select_units(model: CodebaseModel, filters: tuple[UnitSelector, ...]) -> tuple[Unit, ...]:
    """Units of model accepted by every filter, in qualified-name order."""
    selector = all_of(*filters)
    return tuple(unit for unit in model.iter_units() if selector(unit))


def combine_constraints(constraints: tuple[UnitConstraint, ...]) -> UnitConstraint:
    """Merge constraints into one: every failing reason, joined by "; ".

    Args:
        constraints: Constraints to merge (empty tuple never fails)

    Returns:
        Constraint failing if any of the given constraints fails
    """

    def constraint(unit: Unit, model: CodebaseModel) -> str | None:
        reasons = [r for c in constraints if (r := c(unit, model)) is not None]
        return "; ".join(reasons) if reasons else None

    return constraint
