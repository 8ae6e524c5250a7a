"""Domain exceptions: all public errors of layercheck.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from layercheck.domain.model.violation import Violation


class LayerCheckError(Exception):
    """Base for all layercheck error exceptions.

    Allows: except LayerCheckError to catch all library errors.
    """


class LoadError(LayerCheckError):
    """Codebase model could not be loaded.

    Fatal: raised before any rule is evaluated.
    Covers missing/unreadable root, unparsable sources, and an empty
    selection under the package filter.

    Attributes:
        path: Path that failed (root directory or source file).
        reason: Why loading failed.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize with failing path and reason."""
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class RuleDefinitionError(LayerCheckError, ValueError):
    """Invalid rule or rule set.

    Inherits ValueError for semantic correctness (bad definition value).

    Attributes:
        rule_id: Offending rule identifier (may be empty when that is the problem).
        reason: Why the rule is invalid.
    """

    def __init__(self, rule_id: str, reason: str) -> None:
        """Initialize with rule id and reason."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.rule_id = rule_id
        self.reason = reason
        super().__init__(f"Invalid rule {rule_id!r}: {reason}")


class LayeringViolationError(LayerCheckError, AssertionError):
    """Layering rules violated.

    Raised by assert_check() when violations found.
    Inherits AssertionError so pytest renders it as a test failure.

    Attributes:
        violations: All found violations, sorted.
    """

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        """Initialize with violations (at least one)."""
        if not violations:
            raise ValueError("LayeringViolationError requires at least one violation")

        self.violations = violations

        msg_parts = [f"Found {len(violations)} layering violation(s):"]
        msg_parts.extend(str(v) for v in violations)

        super().__init__("\n".join(msg_parts))
