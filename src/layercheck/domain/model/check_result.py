"""Results of rule evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class RuleResult:
    """Outcome of one rule against one model.

    Attributes:
        rule_id: Evaluated rule
        description: Rule description (for reports)
        checked_count: Number of units matched by the selector
        violations: Findings, sorted by Violation.sort_key
    """

    rule_id: str
    description: str
    checked_count: int
    violations: tuple[Violation, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if self.checked_count < 0:
            raise ValueError(f"checked_count must be >= 0, got {self.checked_count}")
        if len(self.violations) > self.checked_count:
            raise ValueError(
                f"{len(self.violations)} violations exceed checked_count {self.checked_count}"
            )
        for violation in self.violations:
            if violation.rule_id != self.rule_id:
                raise ValueError(
                    f"violation of {violation.rule_id!r} in result of {self.rule_id!r}"
                )

    @property
    def passed(self) -> bool:
        """True if rule holds for every selected unit (vacuously for none)."""
        return not self.violations

    @property
    def failed(self) -> bool:
        """True if rule check failed."""
        return not self.passed


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of a full check run: one RuleResult per rule, in rule order.

    Attributes:
        rule_results: Per-rule results
        unit_count: Number of units in the evaluated model
    """

    rule_results: tuple[RuleResult, ...]
    unit_count: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.unit_count < 0:
            raise ValueError(f"unit_count must be >= 0, got {self.unit_count}")

    @classmethod
    def empty(cls) -> CheckResult:
        """Create result with no rules evaluated."""
        return cls(rule_results=(), unit_count=0)

    @property
    def violations(self) -> tuple[Violation, ...]:
        """All violations across rules, sorted."""
        collected = [v for result in self.rule_results for v in result.violations]
        return tuple(sorted(collected, key=lambda v: v.sort_key))

    @property
    def violation_count(self) -> int:
        """Total number of violations."""
        return sum(len(result.violations) for result in self.rule_results)

    @property
    def passed(self) -> bool:
        """True if every rule passed."""
        return all(result.passed for result in self.rule_results)

    @property
    def failed_rules(self) -> tuple[RuleResult, ...]:
        """Results of rules with at least one violation."""
        return tuple(result for result in self.rule_results if result.failed)
