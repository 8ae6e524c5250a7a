"""End-to-end: load a microservice source tree, check, report."""

import json
from pathlib import Path

import pytest

from layercheck import LAYERING_RULES, LayerCheck, LayeringViolationError, load_model
from layercheck.application.reporters import JsonReporter, PlainTextReporter
from layercheck.application.services import LayerChecker, assert_check
from layercheck.domain.model.configuration import CheckConfig
from layercheck.infrastructure.adapters import ASTModelLoader
from tests.factories import write_tree

MICROSERVICE: dict[str, str] = {
    "ms_template/__init__.py": "",
    "ms_template/main.py": (
        "from ms_template.controller.orders import OrderController\n"
        "from ms_template.service.orders import OrderService\n"
        "\n"
        "app = OrderController(OrderService())\n"
    ),
    "ms_template/controller/__init__.py": "",
    "ms_template/controller/orders.py": (
        "from __future__ import annotations\n"
        "\n"
        "from typing import TYPE_CHECKING\n"
        "\n"
        "from ..domain.order import Order\n"
        "\n"
        "if TYPE_CHECKING:\n"
        "    from ..service.orders import OrderService\n"
        "\n"
        "\n"
        "class OrderController:\n"
        "    def __init__(self, service: OrderService) -> None:\n"
        "        self._service = service\n"
        "\n"
        "    def create(self, payload: dict) -> Order:\n"
        "        return self._service.place(Order(**payload))\n"
    ),
    "ms_template/controller/health.py": (
        "from ms_template.repository import orders as order_store\n"
        "\n"
        "\n"
        "def ping() -> bool:\n"
        "    return order_store.OrderRepository.connected()\n"
    ),
    "ms_template/service/__init__.py": "",
    "ms_template/service/orders.py": (
        "from ms_template.domain.order import Order\n"
        "from ms_template.repository.orders import OrderRepository\n"
        "\n"
        "\n"
        "class OrderService:\n"
        "    def __init__(self, repository: OrderRepository | None = None) -> None:\n"
        "        self._repository = repository or OrderRepository()\n"
        "\n"
        "    def place(self, order: Order) -> Order:\n"
        "        return self._repository.save(order)\n"
    ),
    "ms_template/repository/__init__.py": "",
    "ms_template/repository/orders.py": (
        "from ms_template.domain.order import Order\n"
        "\n"
        "\n"
        "class OrderRepository:\n"
        "    @classmethod\n"
        "    def connected(cls) -> bool:\n"
        "        return True\n"
        "\n"
        "    def save(self, order: Order) -> Order:\n"
        "        return order\n"
    ),
    "ms_template/domain/__init__.py": "",
    "ms_template/domain/order.py": (
        "from dataclasses import dataclass\n"
        "\n"
        "\n"
        "@dataclass\n"
        "class Order:\n"
        "    id: int = 0\n"
    ),
    "ms_template/util/__init__.py": "",
    "ms_template/util/audit.py": "class AuditService:\n    pass\n",
}


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    return write_tree(tmp_path / "src", MICROSERVICE)


class TestMicroservice:
    """Full pipeline over a realistic tree."""

    def test_findings(self, source_root: Path) -> None:
        result = LayerCheck(load_model(source_root, "ms_template")).check()

        assert [(v.rule_id, v.subject) for v in result.violations] == [
            ("controllers-do-not-access-repositories", "ms_template.controller.health"),
            ("services-reside-in-service-package", "ms_template.util.audit.AuditService"),
        ]

    def test_module_level_reference_reason(self, source_root: Path) -> None:
        result = LayerCheck(load_model(source_root, "ms_template")).check()
        isolation = next(
            v for v in result.violations if v.rule_id == "controllers-do-not-access-repositories"
        )
        assert "<ms_template.repository.orders.OrderRepository>" in isolation.reason
        assert isolation.location is not None
        assert isolation.location.file == source_root / "ms_template/controller/health.py"

    def test_assert_check_lists_everything(self, source_root: Path) -> None:
        config = CheckConfig(source_dir=source_root, package="ms_template")
        checker = LayerChecker.from_config(config, ASTModelLoader(exclude=config.exclude))
        with pytest.raises(LayeringViolationError) as exc_info:
            assert_check(checker.check())
        assert str(exc_info.value).startswith("Found 2 layering violation(s):")

    def test_reports(self, source_root: Path) -> None:
        result = LayerCheck(load_model(source_root, "ms_template")).check(*LAYERING_RULES)

        text = PlainTextReporter().report(result)
        assert "[FAIL] services-reside-in-service-package (2 checked)" in text
        assert "[PASS] repositories-reside-in-repository-package (1 checked)" in text

        data = json.loads(JsonReporter().report(result))
        assert data["summary"]["violation_count"] == 2

    def test_parallel_and_repeated_runs_agree(self, source_root: Path) -> None:
        layers = LayerCheck(load_model(source_root, "ms_template"))
        first = layers.check()
        assert layers.check(parallel=True) == first
        assert LayerCheck(load_model(source_root, "ms_template")).check() == first

    def test_fixing_the_tree_passes(self, source_root: Path) -> None:
        (source_root / "ms_template/controller/health.py").write_text(
            "def ping() -> bool:\n    return True\n"
        )
        (source_root / "ms_template/util/audit.py").write_text("class Auditor:\n    pass\n")
        LayerCheck(load_model(source_root, "ms_template")).assert_check()
