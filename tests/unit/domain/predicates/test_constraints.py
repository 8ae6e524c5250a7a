"""Tests for domain/predicates/constraints.py."""

import pytest

from layercheck.domain.model.codebase import CodebaseModel
from layercheck.domain.predicates.constraints import (
    not_reference_package,
    only_reference_package,
    reside_in_package,
)
from tests.factories import make_class, make_model, make_module

REPO = "app.repository.orders.OrderRepository"


@pytest.fixture
def model() -> CodebaseModel:
    return make_model(
        make_module("app.repository.orders"),
        make_class(REPO),
        make_class("app.service.orders.OrderService", [REPO]),
    )


class TestResideInPackage:
    """Tests for reside_in_package."""

    def test_holds(self, model: CodebaseModel) -> None:
        constraint = reside_in_package("**.service.**")
        assert constraint(make_class("app.service.orders.OrderService"), model) is None

    def test_fails_with_reason(self, model: CodebaseModel) -> None:
        constraint = reside_in_package("**.service.**")
        reason = constraint(make_class("app.domain.orders.OrderService"), model)
        assert reason == (
            "class <app.domain.orders.OrderService> does not reside in a package "
            "matching '**.service.**' (resides in 'app.domain.orders')"
        )


class TestNotReferencePackage:
    """Tests for not_reference_package."""

    def test_holds_without_forbidden_references(self, model: CodebaseModel) -> None:
        unit = make_class("app.controller.orders.OrderController", ["app.service.orders.OrderService"])
        assert not_reference_package("**.repository.**")(unit, model) is None

    def test_fails_listing_all_references_sorted(self, model: CodebaseModel) -> None:
        unit = make_class(
            "app.controller.orders.OrderController",
            [REPO, "app.repository.orders.find_all", "app.service.orders.OrderService"],
        )
        reason = not_reference_package("**.repository.**")(unit, model)
        assert reason == (
            "class <app.controller.orders.OrderController> references in a package "
            "matching '**.repository.**': "
            "<app.repository.orders.OrderRepository> (in 'app.repository.orders'), "
            "<app.repository.orders.find_all> (in 'app.repository.orders')"
        )

    def test_module_reference_uses_module_as_package(self, model: CodebaseModel) -> None:
        unit = make_module("app.controller.orders", ["app.repository.orders"])
        reason = not_reference_package("**.repository.**")(unit, model)
        assert reason is not None
        assert "<app.repository.orders> (in 'app.repository.orders')" in reason


class TestOnlyReferencePackage:
    """Tests for only_reference_package."""

    def test_holds_inside_allowed(self, model: CodebaseModel) -> None:
        unit = make_class("app.service.orders.OrderService", [REPO])
        assert only_reference_package("**.repository.**", "**.domain.**")(unit, model) is None

    def test_fails_outside_allowed(self, model: CodebaseModel) -> None:
        unit = make_class("app.service.orders.OrderService", [REPO, "requests.get"])
        reason = only_reference_package("**.repository.**", "**.domain.**")(unit, model)
        assert reason == (
            "class <app.service.orders.OrderService> references outside of "
            "'**.repository.**', '**.domain.**': <requests.get> (in 'requests')"
        )

    def test_requires_patterns(self) -> None:
        with pytest.raises(ValueError, match="at least one pattern required"):
            only_reference_package()
