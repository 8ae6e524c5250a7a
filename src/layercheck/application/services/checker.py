"""Main facade for layering checks.

LayerChecker is the primary entry point for running a check: it owns the
model for one verification pass, evaluates the rules and hands the result
to an optional reporter.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Self

from layercheck.application.rules import LAYERING_RULES
from layercheck.application.services.evaluator import evaluate_all
from layercheck.domain.exceptions import LayeringViolationError

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult
    from layercheck.domain.model.codebase import CodebaseModel
    from layercheck.domain.model.configuration import CheckConfig
    from layercheck.domain.model.rule import Rule
    from layercheck.domain.ports.model_loader import ModelLoaderPort
    from layercheck.domain.ports.reporter import ReporterProtocol


class LayerChecker:
    """Facade: model + rules → CheckResult.

    Composition-based: accepts rules and reporter as dependencies.

    Example:
        config = CheckConfig(source_dir=Path("src"), package="ms_template")
        checker = LayerChecker.from_config(config, ASTModelLoader(exclude=config.exclude))
        result = checker.check()
        assert_check(result)
    """

    def __init__(
        self,
        model: CodebaseModel,
        *,
        rules: Sequence[Rule] = LAYERING_RULES,
        reporter: ReporterProtocol | None = None,
        parallel: bool = False,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            model: Loaded codebase model
            rules: Rules to evaluate (default: standard layering rules)
            reporter: Optional reporter for output
            parallel: Evaluate rules concurrently
        """
        if model is None:
            raise TypeError("model must not be None")
        self._model = model
        self._rules = tuple(rules)
        self._reporter = reporter
        self._parallel = parallel

    @classmethod
    def from_config(
        cls,
        config: CheckConfig,
        loader: ModelLoaderPort,
        *,
        rules: Sequence[Rule] = LAYERING_RULES,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Load model per config and create checker.

        Args:
            config: Check configuration
            loader: Model loader (e.g. ASTModelLoader)
            rules: Rules to evaluate
            reporter: Optional reporter

        Returns:
            LayerChecker over the loaded model

        Raises:
            TypeError: If loader is None
            LoadError: If the model cannot be loaded
        """
        if loader is None:
            raise TypeError("loader must not be None")
        model = loader.load(config.source_dir, config.package)
        return cls(model, rules=rules, reporter=reporter, parallel=config.parallel)

    @property
    def model(self) -> CodebaseModel:
        """Codebase model under check."""
        return self._model

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules evaluated by check()."""
        return self._rules

    def check(self) -> CheckResult:
        """Evaluate all rules and return result.

        Returns:
            CheckResult with one RuleResult per rule
        """
        return evaluate_all(self._model, self._rules, parallel=self._parallel)

    def report(self, result: CheckResult) -> str | None:
        """Format result with configured reporter (None without reporter)."""
        if self._reporter is None:
            return None
        return self._reporter.report(result)


def assert_check(result: CheckResult) -> None:
    """Fail the check run if any rule was violated.

    Args:
        result: Result of evaluate_all / LayerChecker.check

    Raises:
        LayeringViolationError: Listing every violation, sorted
    """
    violations = result.violations
    if violations:
        raise LayeringViolationError(violations)
