"""Reporter protocol for output formatting.

Users extend layercheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Output is str, not print(). Caller decides destination.
    layercheck provides PlainTextReporter, JsonReporter and ConsoleReporter.
    """

    def report(self, result: CheckResult) -> str:
        """Format check result.

        Args:
            result: Complete check result

        Returns:
            Formatted report
        """
        ...
