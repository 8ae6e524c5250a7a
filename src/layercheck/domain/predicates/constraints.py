"""Unit constraints: what must hold for every selected unit.

A constraint returns a human-readable reason when the unit fails,
None when it holds. Pure: depends only on the unit and the model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layercheck.domain.predicates.patterns import compile_pattern

if TYPE_CHECKING:
    from layercheck.domain.model.codebase import CodebaseModel
    from layercheck.domain.model.unit import Unit
    from layercheck.domain.predicates.base import UnitConstraint


def reside_in_package(pattern: str) -> UnitConstraint:
    """Create constraint: unit resides in a package matching pattern.

    Args:
        pattern: Package glob, e.g. "**.service.**"

    Returns:
        Constraint function
    """
    compiled = compile_pattern(pattern)

    def constraint(unit: Unit, model: CodebaseModel) -> str | None:
        if compiled.match(unit.package):
            return None
        return (
            f"{unit} does not reside in a package matching '{compiled}' "
            f"(resides in '{unit.package}')"
        )

    return constraint


def not_reference_package(pattern: str) -> UnitConstraint:
    """Create constraint: unit references nothing residing in pattern.

    All offending references are listed in one reason, sorted.

    Args:
        pattern: Forbidden package glob, e.g. "**.repository.**"

    Returns:
        Constraint function
    """
    compiled = compile_pattern(pattern)

    def constraint(unit: Unit, model: CodebaseModel) -> str | None:
        offending = sorted(
            ref for ref in unit.references if compiled.match(model.package_of(ref))
        )
        if not offending:
            return None
        return _format_references(unit, offending, model, f"in a package matching '{compiled}'")

    return constraint


def only_reference_package(*patterns: str) -> UnitConstraint:
    """Create constraint: unit references only units residing in patterns.

    Args:
        *patterns: Allowed package globs (at least one)

    Returns:
        Constraint function

    Raises:
        ValueError: If no patterns provided
    """
    if not patterns:
        raise ValueError("at least one pattern required")
    compiled = tuple(compile_pattern(p) for p in patterns)
    allowed = ", ".join(f"'{p}'" for p in compiled)

    def constraint(unit: Unit, model: CodebaseModel) -> str | None:
        offending = sorted(
            ref
            for ref in unit.references
            if not any(p.match(model.package_of(ref)) for p in compiled)
        )
        if not offending:
            return None
        return _format_references(unit, offending, model, f"outside of {allowed}")

    return constraint


def _format_references(
    unit: Unit,
    offending: list[str],
    model: CodebaseModel,
    where: str,
) -> str:
    """Format reason listing offending references with their packages."""
    targets = ", ".join(f"<{ref}> (in '{model.package_of(ref)}')" for ref in offending)
    return f"{unit} references {where}: {targets}"
