"""Tests for application/services/checker.py."""

from pathlib import Path

import pytest

from layercheck.application.reporters import PlainTextReporter
from layercheck.application.rules import LAYERING_RULES
from layercheck.application.services.checker import LayerChecker, assert_check
from layercheck.domain.exceptions import LayeringViolationError, LoadError
from layercheck.domain.model.check_result import CheckResult
from layercheck.domain.model.codebase import CodebaseModel
from layercheck.domain.model.configuration import CheckConfig
from layercheck.domain.ports.model_loader import ModelLoaderPort
from tests.factories import make_class, make_model


class StubLoader(ModelLoaderPort):
    """Loader returning a prepared model and recording calls."""

    def __init__(self, model: CodebaseModel) -> None:
        self.model = model
        self.calls: list[tuple[Path, str]] = []

    def load(self, root_path: Path, package_filter: str) -> CodebaseModel:
        self.calls.append((root_path, package_filter))
        return self.model


class FailingLoader(ModelLoaderPort):
    """Loader that always fails like a missing source root."""

    def load(self, root_path: Path, package_filter: str) -> CodebaseModel:
        raise LoadError(root_path, "path does not exist")


class TestLayerChecker:
    """Tests for LayerChecker facade."""

    def test_default_rules(self) -> None:
        checker = LayerChecker(make_model(make_class("app.x.A")))
        assert checker.rules == LAYERING_RULES

    def test_none_model_rejected(self) -> None:
        with pytest.raises(TypeError, match="model must not be None"):
            LayerChecker(None)  # type: ignore[arg-type]

    def test_check(self) -> None:
        checker = LayerChecker(make_model(make_class("app.web.OrderController")))
        result = checker.check()
        assert result.violation_count == 1

    def test_report_without_reporter(self) -> None:
        checker = LayerChecker(make_model(make_class("app.x.A")))
        assert checker.report(checker.check()) is None

    def test_report_with_reporter(self) -> None:
        checker = LayerChecker(make_model(make_class("app.x.A")), reporter=PlainTextReporter())
        report = checker.report(checker.check())
        assert report is not None
        assert "Result: PASSED" in report

    def test_from_config_uses_loader(self) -> None:
        model = make_model(make_class("app.x.A"))
        loader = StubLoader(model)
        config = CheckConfig(source_dir=Path("/src"), package="app", parallel=True)

        checker = LayerChecker.from_config(config, loader=loader)

        assert checker.model is model
        assert loader.calls == [(Path("/src"), "app")]

    def test_from_config_requires_loader(self) -> None:
        config = CheckConfig(source_dir=Path("/src"), package="app")
        with pytest.raises(TypeError, match="loader must not be None"):
            LayerChecker.from_config(config, None)  # type: ignore[arg-type]

    def test_from_config_load_error(self) -> None:
        config = CheckConfig(source_dir=Path("/missing"), package="shop")
        with pytest.raises(LoadError, match="path does not exist"):
            LayerChecker.from_config(config, FailingLoader())


class TestAssertCheck:
    """Tests for assert_check."""

    def test_passes_silently(self) -> None:
        assert assert_check(CheckResult.empty()) is None

    def test_raises_with_all_violations(self) -> None:
        checker = LayerChecker(
            make_model(make_class("app.web.OrderController"), make_class("app.web.UserService"))
        )
        with pytest.raises(LayeringViolationError) as exc_info:
            assert_check(checker.check())

        error = exc_info.value
        assert len(error.violations) == 2
        message = str(error)
        assert "[controllers-reside-in-controller-package] app.web.OrderController" in message
        assert "[services-reside-in-service-package] app.web.UserService" in message
