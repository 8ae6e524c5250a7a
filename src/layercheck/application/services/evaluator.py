"""Rule evaluator: rules × codebase model → violations.

Pure functions. The model is immutable, so rules may be evaluated
concurrently without synchronization; output order never depends on
evaluation order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from layercheck.application.rules import LAYERING_RULES
from layercheck.domain.exceptions import RuleDefinitionError
from layercheck.domain.model.check_result import CheckResult, RuleResult
from layercheck.domain.model.violation import Violation

if TYPE_CHECKING:
    from layercheck.domain.model.codebase import CodebaseModel
    from layercheck.domain.model.rule import Rule

logger = logging.getLogger(__name__)


def evaluate(model: CodebaseModel, rule: Rule) -> frozenset[Violation]:
    """Evaluate one rule against the model.

    Selects units matching the rule's selector, tests the constraint on
    each and emits a Violation for every failing unit.

    Args:
        model: Codebase model to check
        rule: Rule to evaluate

    Returns:
        Set of violations (empty if rule holds, also when nothing selected)
    """
    violations: set[Violation] = set()
    for unit in model.iter_units():
        if not rule.selector(unit):
            continue
        reason = rule.constraint(unit, model)
        if reason is not None:
            violations.add(
                Violation(
                    rule_id=rule.rule_id,
                    subject=unit.qualified_name,
                    reason=reason,
                    location=unit.location,
                )
            )
    return frozenset(violations)


def evaluate_rule(model: CodebaseModel, rule: Rule) -> RuleResult:
    """Evaluate one rule and package sorted findings with checked count.

    Args:
        model: Codebase model to check
        rule: Rule to evaluate

    Returns:
        RuleResult with violations sorted by (rule, unit, reason)
    """
    checked_count = sum(1 for unit in model.iter_units() if rule.selector(unit))
    violations = tuple(sorted(evaluate(model, rule), key=lambda v: v.sort_key))

    logger.debug(
        "rule %s: %d unit(s) checked, %d violation(s)",
        rule.rule_id,
        checked_count,
        len(violations),
    )

    return RuleResult(
        rule_id=rule.rule_id,
        description=rule.description,
        checked_count=checked_count,
        violations=violations,
    )


def evaluate_all(
    model: CodebaseModel,
    rules: Sequence[Rule] = LAYERING_RULES,
    *,
    parallel: bool = False,
) -> CheckResult:
    """Evaluate every rule independently.

    A failing rule never prevents evaluation of the others. Results are
    returned in rule order regardless of `parallel`.

    Args:
        model: Codebase model to check
        rules: Rules to evaluate (ids must be unique, default: LAYERING_RULES)
        parallel: Run rules on a thread pool

    Returns:
        CheckResult with one RuleResult per rule

    Raises:
        RuleDefinitionError: If two rules share an id
    """
    _validate_rule_ids(rules)

    if parallel and len(rules) > 1:
        with ThreadPoolExecutor(max_workers=len(rules)) as executor:
            results = tuple(executor.map(lambda rule: evaluate_rule(model, rule), rules))
    else:
        results = tuple(evaluate_rule(model, rule) for rule in rules)

    return CheckResult(rule_results=results, unit_count=len(model))


def _validate_rule_ids(rules: Sequence[Rule]) -> None:
    """FAIL-FIRST: rule ids must be unique within one run."""
    seen: set[str] = set()
    for rule in rules:
        if rule.rule_id in seen:
            raise RuleDefinitionError(rule.rule_id, "duplicate rule id")
        seen.add(rule.rule_id)
