"""Plain text reporter.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult, RuleResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter: one section per rule, violations numbered."""

    def __init__(self, *, width: int = 70) -> None:
        """Initialize reporter.

        Args:
            width: Width of separator lines
        """
        if width <= 0:
            raise ValueError(f"width must be > 0, got {width}")
        self._width = width

    def report(self, result: CheckResult) -> str:
        """Format check results as plain text.

        Args:
            result: Complete check result

        Returns:
            Multi-line text report
        """
        lines: list[str] = []
        lines.extend(self._header())
        lines.extend(self._summary(result))

        for rule_result in result.rule_results:
            lines.extend(self._rule_section(rule_result))

        lines.extend(self._footer(result))
        return "\n".join(lines) + "\n"

    def _header(self) -> list[str]:
        return [
            "=" * self._width,
            "Layering Check Results",
            "=" * self._width,
        ]

    def _summary(self, result: CheckResult) -> list[str]:
        return [
            "",
            "Summary:",
            f"  Units: {result.unit_count}",
            f"  Rules: {len(result.rule_results)}",
            f"  Violations: {result.violation_count}",
            f"  Status: {self.status(result.passed)}",
        ]

    def _rule_section(self, rule_result: RuleResult) -> list[str]:
        status = self.status(rule_result.passed)
        lines = [
            "",
            "-" * self._width,
            f"[{status}] {rule_result.rule_id} ({rule_result.checked_count} checked)",
        ]
        if rule_result.description:
            lines.append(f"  {rule_result.description}")

        for i, violation in enumerate(rule_result.violations, start=1):
            lines.append(f"  {i}. {violation.subject}")
            lines.append(f"     {violation.reason}")
            if violation.location is not None:
                lines.append(f"     at {violation.location}")
        return lines

    def _footer(self, result: CheckResult) -> list[str]:
        status = "PASSED" if result.passed else "FAILED"
        return [
            "",
            "=" * self._width,
            f"Result: {status}",
            "=" * self._width,
        ]
