"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from layercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult, RuleResult
    from layercheck.domain.model.violation import Violation


class JsonReporter(BaseReporter):
    """JSON reporter for CI/CD integration.

    Schema mirrors domain structure 1:1 with summary added.
    Key order and violation order are stable between runs.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, result: CheckResult) -> str:
        """Format check results as JSON string.

        Args:
            result: Complete check result

        Returns:
            JSON document
        """
        data = {
            "passed": result.passed,
            "summary": {
                "unit_count": result.unit_count,
                "rule_count": len(result.rule_results),
                "violation_count": result.violation_count,
            },
            "rules": [_rule_result_to_dict(r) for r in result.rule_results],
            "violations": [_violation_to_dict(v) for v in result.violations],
        }
        return json.dumps(data, indent=self._indent)


def _rule_result_to_dict(rule_result: RuleResult) -> dict[str, object]:
    """Convert RuleResult to dict."""
    return {
        "rule_id": rule_result.rule_id,
        "description": rule_result.description,
        "passed": rule_result.passed,
        "checked_count": rule_result.checked_count,
        "violation_count": len(rule_result.violations),
    }


def _violation_to_dict(violation: Violation) -> dict[str, object]:
    """Convert Violation to dict."""
    location = violation.location
    return {
        "rule_id": violation.rule_id,
        "subject": violation.subject,
        "reason": violation.reason,
        "location": location.as_dict() if location is not None else None,
    }
