"""Shared base for the bundled reporters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Abstract reporter satisfying ReporterProtocol.

    Subclasses return the whole report as one string and never print.
    Violations arrive already sorted from CheckResult.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: CheckResult) -> str:
                return f"{self.status(result.passed)}: {result.violation_count}"
    """

    @staticmethod
    def status(passed: bool) -> str:
        """Short status label: PASS or FAIL."""
        return "PASS" if passed else "FAIL"

    @abstractmethod
    def report(self, result: CheckResult) -> str:
        """Render result."""
