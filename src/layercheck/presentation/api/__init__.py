"""Fluent API for layering tests.

Public exports:
    LayerCheck: Entry point for fluent DSL
    UnitQuery/UnitAssertion: Unit query and assertion builders
"""

from layercheck.presentation.api.dsl import (
    LayerCheck,
    UnitAssertion,
    UnitQuery,
)

__all__ = [
    "LayerCheck",
    "UnitAssertion",
    "UnitQuery",
]
