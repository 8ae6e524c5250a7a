"""Tests for domain/model/codebase.py."""

from pathlib import Path
from types import MappingProxyType

import pytest

from layercheck.domain.model.codebase import CodebaseModel
from tests.factories import make_class, make_model, make_module


class TestCodebaseModelCreation:
    """Tests for model construction."""

    def test_from_units_derives_modules(self) -> None:
        model = make_model(
            make_module("app.service.orders"),
            make_class("app.service.orders.OrderService"),
            make_class("app.repository.orders.OrderRepository"),
        )
        assert model.modules == frozenset({"app.service.orders", "app.repository.orders"})
        assert len(model) == 3

    def test_units_sorted_and_read_only(self) -> None:
        model = make_model(make_class("app.z.Zed"), make_class("app.a.Able"))
        assert list(model.units) == ["app.a.Able", "app.z.Zed"]
        assert isinstance(model.units, MappingProxyType)
        with pytest.raises(TypeError):
            model.units["app.b.Bee"] = make_class("app.b.Bee")  # type: ignore[index]

    def test_iter_units_in_name_order(self) -> None:
        model = make_model(make_class("app.z.Zed"), make_module("app.a"))
        assert [u.qualified_name for u in model.iter_units()] == ["app.a", "app.z.Zed"]

    def test_duplicate_units_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate unit"):
            make_model(make_class("app.x.Foo"), make_class("app.x.Foo"))

    def test_key_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="does not match key"):
            CodebaseModel(
                root_path=Path("/test"),
                package_filter="app",
                units={"app.x.Bar": make_class("app.x.Foo")},
                modules=frozenset({"app.x"}),
            )

    def test_module_unit_must_be_listed(self) -> None:
        with pytest.raises(ValueError, match="missing from modules"):
            CodebaseModel(
                root_path=Path("/test"),
                package_filter="app",
                units={"app.x": make_module("app.x")},
            )

    def test_empty(self) -> None:
        model = CodebaseModel.empty()
        assert len(model) == 0
        assert list(model.iter_units()) == []


class TestCodebaseModelLookup:
    """Tests for lookup and package resolution."""

    @pytest.fixture
    def model(self) -> CodebaseModel:
        return make_model(
            make_module("app.repository.orders"),
            make_class("app.repository.orders.OrderRepository"),
        )

    def test_get_unit(self, model: CodebaseModel) -> None:
        unit = model.get_unit("app.repository.orders.OrderRepository")
        assert unit is not None
        assert unit.simple_name == "OrderRepository"
        assert model.get_unit("app.missing") is None

    def test_contains(self, model: CodebaseModel) -> None:
        assert "app.repository.orders" in model
        assert "app.repository" not in model

    def test_package_of_unit(self, model: CodebaseModel) -> None:
        assert model.package_of("app.repository.orders.OrderRepository") == "app.repository.orders"

    def test_package_of_module_is_itself(self, model: CodebaseModel) -> None:
        assert model.package_of("app.repository.orders") == "app.repository.orders"

    def test_package_of_external_name(self, model: CodebaseModel) -> None:
        assert model.package_of("sqlalchemy.orm.Session") == "sqlalchemy.orm"
        assert model.package_of("os") == "os"

    def test_package_of_empty_rejected(self, model: CodebaseModel) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            model.package_of("")
