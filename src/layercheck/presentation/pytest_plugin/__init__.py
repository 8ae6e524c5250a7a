"""pytest plugin for layercheck.

Provides fixtures for layering tests:
    layer_model: Codebase model loaded from source directory
    layer_rules: Rules to check (override in conftest.py)
    layer_check: Fluent DSL entry point (LayerCheck)

Configuration (pytest.ini or pyproject.toml):
    layercheck_source_dir: Source directory to analyze (default: "src")
    layercheck_package: Root package name (required)

Example:
    @pytest.mark.layering
    def test_layers(layer_check, layer_rules):
        layer_check.assert_check(*layer_rules)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from layercheck.presentation.pytest_plugin.fixtures import (
    layer_check,
    layer_model,
    layer_rules,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "layer_check",
    "layer_model",
    "layer_rules",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register layercheck ini options."""
    parser.addini(
        "layercheck_source_dir",
        "Source directory (import root) scanned by layercheck",
        default="src",
    )
    parser.addini(
        "layercheck_package",
        "Root package checked by layercheck",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "layering: mark test as layering architecture test",
    )
