"""Tests for infrastructure/analyzers/reference_analyzer.py."""

import ast

import pytest

from layercheck.infrastructure.analyzers.reference_analyzer import ReferenceAnalyzer


def class_refs(source: str) -> frozenset[str]:
    tree = ast.parse(source)
    node = next(n for n in tree.body if isinstance(n, ast.ClassDef))
    return ReferenceAnalyzer().analyze_class(node)


def module_refs(source: str) -> frozenset[str]:
    return ReferenceAnalyzer().analyze_module(ast.parse(source))


class TestClassReferences:
    """Tests for analyze_class."""

    def test_bases_decorators_keywords(self) -> None:
        refs = class_refs(
            "@register\nclass C(Base, metaclass=abc.ABCMeta):\n    pass\n"
        )
        assert refs == frozenset({"register", "Base", "abc.ABCMeta"})

    def test_body_usages(self) -> None:
        refs = class_refs(
            "class C:\n"
            "    repo: OrderRepository\n"
            "    def __init__(self, service: 'OrderService') -> None:\n"
            "        self._service = service\n"
            "        self._cache = cache.build()\n"
            "    def find(self, key):\n"
            "        result = orders.repo.find(key)\n"
            "        return Response(result)\n"
        )
        assert refs == frozenset(
            {"OrderRepository", "OrderService", "cache.build", "orders.repo.find", "Response"}
        )

    def test_locals_and_parameters_excluded(self) -> None:
        refs = class_refs(
            "class C:\n"
            "    def run(self, items):\n"
            "        total = 0\n"
            "        for item in items:\n"
            "            total += item.value\n"
            "        squares = [x * x for x in items]\n"
            "        return lambda y: y + total\n"
        )
        assert refs == frozenset()

    def test_nested_class_body_skipped(self) -> None:
        refs = class_refs(
            "class Outer:\n"
            "    class Inner:\n"
            "        dep = InnerDep\n"
            "    def make(self):\n"
            "        return OuterDep()\n"
        )
        assert refs == frozenset({"OuterDep"})

    def test_class_inside_method_belongs_to_unit(self) -> None:
        refs = class_refs(
            "class C:\n"
            "    def make(self):\n"
            "        class Local(Helper):\n"
            "            pass\n"
            "        return Local\n"
        )
        assert refs == frozenset({"Helper"})

    def test_match_capture_is_local(self) -> None:
        refs = class_refs(
            "class C:\n"
            "    def handle(self, event):\n"
            "        match event:\n"
            "            case {\"repo\": OrderRepository}:\n"
            "                return OrderRepository\n"
        )
        assert refs == frozenset()

    def test_class_body_binding_shadows_global(self) -> None:
        refs = class_refs(
            "class C:\n"
            "    OrderRepository = make_fake()\n"
            "    default = OrderRepository.create()\n"
        )
        assert refs == frozenset({"make_fake"})

    def test_class_body_binding_not_visible_in_methods(self) -> None:
        refs = class_refs(
            "class C:\n"
            "    OrderRepository = None\n"
            "    def load(self):\n"
            "        return OrderRepository()\n"
        )
        assert refs == frozenset({"OrderRepository"})

    def test_unparsable_string_annotation_ignored(self) -> None:
        refs = class_refs("class C:\n    x: 'not a valid annotation!'\n")
        assert refs == frozenset()

    def test_none_rejected(self) -> None:
        with pytest.raises(TypeError, match="node must not be None"):
            ReferenceAnalyzer().analyze_class(None)  # type: ignore[arg-type]


class TestModuleReferences:
    """Tests for analyze_module."""

    def test_module_code_and_functions(self) -> None:
        refs = module_refs(
            "router = APIRouter()\n"
            "def list_orders(limit: int = DEFAULT_LIMIT):\n"
            "    return repository.fetch_all(limit)\n"
        )
        assert refs == frozenset({"APIRouter", "int", "DEFAULT_LIMIT", "repository.fetch_all"})

    def test_class_bodies_excluded(self) -> None:
        refs = module_refs("class C(Base):\n    x = Dep\n")
        assert refs == frozenset()

    def test_function_locals_excluded(self) -> None:
        refs = module_refs(
            "def f(session):\n"
            "    query = session.query\n"
            "    return query\n"
        )
        assert refs == frozenset()
