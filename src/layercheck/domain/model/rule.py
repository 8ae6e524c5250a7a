"""Rule definition: (selector, constraint) pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.predicates.base import UnitConstraint, UnitSelector


@dataclass(frozen=True, slots=True)
class Rule:
    """Architecture rule over the codebase model.

    The selector picks the units the rule applies to. The constraint
    returns a reason string for a failing unit, None when it holds.
    Both must be pure: same model + same rule => same violations.

    Attributes:
        rule_id: Unique identifier (kebab-case by convention)
        description: What the rule expects, in prose
        selector: Unit -> bool
        constraint: (Unit, CodebaseModel) -> reason | None
    """

    rule_id: str
    description: str
    selector: UnitSelector
    constraint: UnitConstraint

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not callable(self.selector):
            raise TypeError(f"selector must be callable, got {type(self.selector).__name__}")
        if not callable(self.constraint):
            raise TypeError(
                f"constraint must be callable, got {type(self.constraint).__name__}"
            )

    def __str__(self) -> str:
        return f"{self.rule_id}: {self.description}" if self.description else self.rule_id
