"""Fluent API (DSL) for layering tests.

Entry point for fluent unit queries and assertions.

Example:
    layers = LayerCheck(model)
    layers.classes().that_reside_in_package("**.controller.**").should().not_reference_package(
        "**.repository.**"
    ).assert_check()
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.application.rules import LAYERING_RULES
from layercheck.application.services.checker import assert_check as assert_result
from layercheck.application.services.evaluator import evaluate_all, evaluate_rule
from layercheck.domain.exceptions import LayeringViolationError
from layercheck.domain.model.rule import Rule
from layercheck.domain.predicates.constraints import (
    not_reference_package,
    only_reference_package,
    reside_in_package,
)
from layercheck.domain.predicates.selectors import (
    all_of,
    has_simple_name_ending_with,
    has_simple_name_matching,
    is_class,
    is_module,
    resides_in_package,
)
from layercheck.presentation.api._helpers import combine_constraints, select_units

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult
    from layercheck.domain.model.codebase import CodebaseModel
    from layercheck.domain.model.unit import Unit
    from layercheck.domain.model.violation import Violation
    from layercheck.domain.predicates.base import UnitConstraint, UnitSelector

ANONYMOUS_RULE_ID = "fluent-assertion"


class LayerCheck:
    """Entry point for layering analysis.

    Provides fluent API for querying units and asserting rules.

    Attributes:
        _model: Loaded codebase model
        _rules: Rules evaluated when check() gets none
    """

    def __init__(self, model: CodebaseModel, rules: tuple[Rule, ...] = LAYERING_RULES) -> None:
        """Initialize layering checker.

        Args:
            model: Codebase model to analyze
            rules: Default rules for check() and assert_check()

        Raises:
            TypeError: If model is None
        """
        if model is None:
            raise TypeError("model must not be None")
        self._model = model
        self._rules = tuple(rules)

    def units(self) -> UnitQuery:
        """Start query over all units (classes and modules)."""
        return UnitQuery.create(self._model)

    def classes(self) -> UnitQuery:
        """Start query over class units."""
        return UnitQuery.create(self._model, is_class())

    def modules(self) -> UnitQuery:
        """Start query over module units."""
        return UnitQuery.create(self._model, is_module())

    def check(self, *rules: Rule, parallel: bool = False) -> CheckResult:
        """Evaluate rules against the model.

        Args:
            *rules: Rules to evaluate (default: the rules given at construction)
            parallel: Evaluate rules concurrently

        Returns:
            CheckResult with one RuleResult per rule
        """
        return evaluate_all(self._model, rules or self._rules, parallel=parallel)

    def assert_check(self, *rules: Rule) -> None:
        """Evaluate rules and raise on violations.

        Raises:
            LayeringViolationError: If any violations found
        """
        assert_result(self.check(*rules))

    @property
    def model(self) -> CodebaseModel:
        """Access underlying codebase model."""
        return self._model


@dataclass(frozen=True, slots=True)
class UnitQuery:
    """Immutable query builder for units.

    Supports chaining filters before transitioning to assertions.
    """

    _model: CodebaseModel
    _filters: tuple[UnitSelector, ...] = ()

    @classmethod
    def create(cls, model: CodebaseModel, *filters: UnitSelector) -> UnitQuery:
        """Create new query for model.

        Args:
            model: Model to query
            *filters: Initial filters (e.g. unit kind)

        Returns:
            Fresh UnitQuery
        """
        return cls(_model=model, _filters=filters)

    def _with_filter(self, predicate: UnitSelector) -> UnitQuery:
        """Return new query with additional filter (immutable)."""
        return UnitQuery(
            _model=self._model,
            _filters=(*self._filters, predicate),
        )

    def that_have_simple_name_ending_with(self, suffix: str) -> UnitQuery:
        """Filter units whose simple name ends with suffix.

        Args:
            suffix: Required name suffix (e.g. "Controller")

        Returns:
            Filtered UnitQuery
        """
        return self._with_filter(has_simple_name_ending_with(suffix))

    def that_have_simple_name_matching(self, regex: str) -> UnitQuery:
        """Filter units whose simple name matches regex (search semantics)."""
        return self._with_filter(has_simple_name_matching(regex))

    def that_reside_in_package(self, pattern: str) -> UnitQuery:
        """Filter units by package glob pattern.

        Supports glob patterns: *, **, ?
        See layercheck.domain.predicates.patterns for syntax.

        Args:
            pattern: Package pattern

        Returns:
            Filtered UnitQuery
        """
        return self._with_filter(resides_in_package(pattern))

    def that(self, predicate: Callable[[Unit], bool]) -> UnitQuery:
        """Filter by custom predicate."""
        return self._with_filter(predicate)

    def should(self) -> UnitAssertion:
        """Transition to assertion mode.

        Returns:
            UnitAssertion over units matching current filters
        """
        return UnitAssertion(_model=self._model, _filters=self._filters)

    def execute(self) -> tuple[Unit, ...]:
        """Execute query and return matching units.

        Returns:
            Tuple of units matching all filters, sorted by qualified name
        """
        return select_units(self._model, self._filters)


@dataclass(frozen=True, slots=True)
class UnitAssertion:
    """Immutable assertion builder for units.

    Supports chaining assertions before execution. All checks on one unit
    yield at most one violation; its reason joins every failing check.
    """

    _model: CodebaseModel
    _filters: tuple[UnitSelector, ...]
    _constraints: tuple[UnitConstraint, ...] = ()

    def _with_constraint(self, constraint: UnitConstraint) -> UnitAssertion:
        """Return new assertion with additional constraint (immutable)."""
        return UnitAssertion(
            _model=self._model,
            _filters=self._filters,
            _constraints=(*self._constraints, constraint),
        )

    def reside_in_package(self, pattern: str) -> UnitAssertion:
        """Assert units reside in a package matching pattern."""
        return self._with_constraint(reside_in_package(pattern))

    def not_reference_package(self, pattern: str) -> UnitAssertion:
        """Assert units reference nothing in a package matching pattern."""
        return self._with_constraint(not_reference_package(pattern))

    def only_reference_package(self, *patterns: str) -> UnitAssertion:
        """Assert units reference only packages matching patterns.

        Args:
            *patterns: Allowed package patterns (at least one required)

        Returns:
            Assertion with added check

        Raises:
            ValueError: If no patterns provided
        """
        if not patterns:
            raise ValueError("at least one pattern required")
        return self._with_constraint(only_reference_package(*patterns))

    def satisfy(self, constraint: UnitConstraint) -> UnitAssertion:
        """Assert custom constraint: (unit, model) → reason or None."""
        if not callable(constraint):
            raise TypeError("constraint must be callable")
        return self._with_constraint(constraint)

    def as_rule(self, rule_id: str, description: str = "") -> Rule:
        """Freeze this assertion into a Rule for evaluate_all / LayerCheck.check.

        Args:
            rule_id: Unique rule identifier
            description: Human-readable expectation

        Returns:
            Rule selecting the queried units with the chained constraints
        """
        return Rule(
            rule_id=rule_id,
            description=description,
            selector=all_of(*self._filters),
            constraint=combine_constraints(self._constraints),
        )

    def collect(self) -> tuple[Violation, ...]:
        """Execute checks and return violations (sorted)."""
        rule = self.as_rule(ANONYMOUS_RULE_ID)
        return evaluate_rule(self._model, rule).violations

    def assert_check(self) -> None:
        """Execute checks and raise on violations.

        Raises:
            LayeringViolationError: If any violations found
        """
        violations = self.collect()
        if violations:
            raise LayeringViolationError(violations)

    def is_valid(self) -> bool:
        """Check if all assertions pass."""
        return len(self.collect()) == 0

    @property
    def unit_count(self) -> int:
        """Number of units being checked."""
        return len(select_units(self._model, self._filters))
