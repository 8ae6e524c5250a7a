"""Unit selectors: which units a rule applies to."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from layercheck.domain.predicates.patterns import compile_pattern

if TYPE_CHECKING:
    from layercheck.domain.model.unit import Unit
    from layercheck.domain.predicates.base import UnitSelector


def has_simple_name_ending_with(suffix: str) -> UnitSelector:
    """Create selector: unit simple name ends with suffix (case-sensitive).

    Args:
        suffix: Required suffix, e.g. "Controller"

    Returns:
        Selector function

    Raises:
        ValueError: If suffix is empty
    """
    if not suffix:
        raise ValueError("suffix must not be empty")

    def selector(unit: Unit) -> bool:
        return unit.simple_name.endswith(suffix)

    return selector


def has_simple_name_matching(regex: str) -> UnitSelector:
    """Create selector: unit simple name matches regex.

    Args:
        regex: Regular expression pattern (search semantics)

    Returns:
        Selector function

    Raises:
        ValueError: If regex is invalid
    """
    try:
        compiled = re.compile(regex)
    except re.error as e:
        raise ValueError(f"Invalid regex '{regex}': {e}") from e

    def selector(unit: Unit) -> bool:
        return compiled.search(unit.simple_name) is not None

    return selector


def resides_in_package(pattern: str) -> UnitSelector:
    """Create selector: unit package matches pattern.

    Args:
        pattern: Package glob, e.g. "**.controller.**"

    Returns:
        Selector function
    """
    compiled = compile_pattern(pattern)

    def selector(unit: Unit) -> bool:
        return compiled.match(unit.package)

    return selector


def is_class() -> UnitSelector:
    """Create selector: unit is a class."""

    def selector(unit: Unit) -> bool:
        return unit.is_class

    return selector


def is_module() -> UnitSelector:
    """Create selector: unit is a module."""

    def selector(unit: Unit) -> bool:
        return unit.is_module

    return selector


def all_of(*selectors: UnitSelector) -> UnitSelector:
    """Create selector: every given selector matches (none given = all units)."""

    def selector(unit: Unit) -> bool:
        return all(s(unit) for s in selectors)

    return selector
