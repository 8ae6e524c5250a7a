"""Rule violation entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Violation:
    """Finding: one unit fails one rule.

    Not an exception. Accumulated per rule and reported together.

    Attributes:
        rule_id: Identifier of violated rule
        subject: Qualified name of offending unit
        reason: Human-readable explanation
        location: Definition site of the unit (if known)
    """

    rule_id: str
    subject: str
    reason: str
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.subject:
            raise ValueError("subject must not be empty")
        if not self.reason:
            raise ValueError("reason must not be empty")

    @property
    def sort_key(self) -> tuple[str, str, str]:
        """Deterministic report order: rule, unit, reason."""
        return (self.rule_id, self.subject, self.reason)

    def __str__(self) -> str:
        """Format violation for display."""
        lines = [f"[{self.rule_id}] {self.subject}: {self.reason}"]
        if self.location is not None:
            lines.append(f"  at {self.location}")
        return "\n".join(lines)
