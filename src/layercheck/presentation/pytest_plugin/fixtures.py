"""Session fixtures exposing the loaded model and rules to tests.

Projects override layer_rules in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from layercheck.application.rules import LAYERING_RULES
from layercheck.domain.model.configuration import CheckConfig
from layercheck.infrastructure.adapters.ast_loader import ASTModelLoader
from layercheck.presentation.api.dsl import LayerCheck

if TYPE_CHECKING:
    from layercheck.domain.model.codebase import CodebaseModel
    from layercheck.domain.model.rule import Rule


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Ini option as str; default when unset or blank."""
    return str(config.getini(name) or default).strip() or default


def build_config(config: pytest.Config) -> CheckConfig:
    """Build CheckConfig from layercheck_* ini options.

    Raises:
        pytest.UsageError: If layercheck_package is not configured
    """
    root_dir = Path(str(config.rootpath))
    source_dir = _get_ini_value(config, "layercheck_source_dir", "src")
    package = _get_ini_value(config, "layercheck_package", "")

    if not package:
        raise pytest.UsageError(
            "layercheck_package is not set. "
            "Configure layercheck_package in pytest.ini or pyproject.toml."
        )

    return CheckConfig(source_dir=root_dir / source_dir, package=package)


@pytest.fixture(scope="session")
def layer_model(request: pytest.FixtureRequest) -> CodebaseModel:
    """Load codebase model from configured source directory.

    Reads layercheck_source_dir and layercheck_package from pytest.ini.

    Returns:
        Loaded CodebaseModel
    """
    config = build_config(request.config)
    loader = ASTModelLoader(exclude=config.exclude)
    return loader.load(config.source_dir, config.package)


@pytest.fixture(scope="session")
def layer_rules() -> tuple[Rule, ...]:
    """Rules checked by layer_check.check().

    User overrides this fixture in their conftest.py to add or replace
    rules.

    Returns:
        Standard layering rules
    """
    return LAYERING_RULES


@pytest.fixture(scope="session")
def layer_check(layer_model: CodebaseModel, layer_rules: tuple[Rule, ...]) -> LayerCheck:
    """Fluent DSL entry point; check() and assert_check() default to layer_rules."""
    return LayerCheck(layer_model, layer_rules)
