"""Tests for infrastructure/analyzers/base.py."""

import ast
from pathlib import Path

import pytest

from layercheck.infrastructure.analyzers.base import (
    collect_bindings,
    compute_module_name,
    dotted_name,
    parameter_names,
    resolve_relative_import,
    shallow_walk,
)


class TestComputeModuleName:
    """Tests for compute_module_name."""

    @pytest.mark.parametrize(
        ("relative", "expected"),
        [
            ("app/utils.py", "app.utils"),
            ("app/__init__.py", "app"),
            ("app/services/user.py", "app.services.user"),
            ("__init__.py", None),
            ("my-app/x.py", None),
        ],
    )
    def test_names(self, relative: str, expected: str | None) -> None:
        root = Path("/src")
        assert compute_module_name(root / relative, root) == expected

    def test_outside_root_rejected(self) -> None:
        with pytest.raises(ValueError):
            compute_module_name(Path("/other/x.py"), Path("/src"))


class TestResolveRelativeImport:
    """Tests for resolve_relative_import."""

    def test_absolute(self) -> None:
        assert resolve_relative_import("os.path", 0, "app.x") == "os.path"

    def test_sibling(self) -> None:
        assert resolve_relative_import("orders", 1, "app.service.users") == "app.service.orders"

    def test_parent(self) -> None:
        assert (
            resolve_relative_import("repository.orders", 2, "app.service.users")
            == "app.repository.orders"
        )

    def test_bare_dot(self) -> None:
        assert resolve_relative_import(None, 1, "app.service.users") == "app.service"

    def test_package_dot_is_itself(self) -> None:
        assert resolve_relative_import("orders", 1, "app.service", is_package=True) == (
            "app.service.orders"
        )

    def test_escaping_package_rejected(self) -> None:
        with pytest.raises(ValueError, match="exceeds package depth"):
            resolve_relative_import("x", 2, "app")

    def test_absolute_without_module_rejected(self) -> None:
        with pytest.raises(ValueError, match="absolute import must have module"):
            resolve_relative_import(None, 0, "app")


class TestDottedName:
    """Tests for dotted_name."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("repo", "repo"),
            ("orders.repo.find", "orders.repo.find"),
            ("get_repo().find", None),
        ],
    )
    def test_dotted(self, source: str, expected: str | None) -> None:
        node = ast.parse(source, mode="eval").body
        assert dotted_name(node) == expected


class TestBindings:
    """Tests for shallow_walk / collect_bindings / parameter_names."""

    def test_shallow_walk_stops_at_scopes(self) -> None:
        tree = ast.parse("def f():\n    inner = 1\nx = 2\n")
        names = {n.id for n in shallow_walk(tree.body) if isinstance(n, ast.Name)}
        assert names == {"x"}

    def test_collect_bindings(self) -> None:
        source = (
            "a = 1\n"
            "b: int = 2\n"
            "for c in []: pass\n"
            "with open('x') as d: pass\n"
            "try:\n    pass\nexcept Exception as e:\n    pass\n"
            "if (f := 3): pass\n"
            "[g for g in []]\n"
            "def h(): pass\n"
            "class I: pass\n"
            "import os\n"
            "x += 1\n"
        )
        tree = ast.parse(source)
        assert collect_bindings(tree.body) == frozenset("abcdefghI")

    def test_match_captures(self) -> None:
        source = (
            "match event:\n"
            "    case {\"repo\": repo, **rest}:\n"
            "        pass\n"
            "    case [first, *others]:\n"
            "        pass\n"
            "    case Point(x=px) | Point(y=px):\n"
            "        pass\n"
            "    case _:\n"
            "        pass\n"
        )
        tree = ast.parse(source)
        assert collect_bindings(tree.body) == frozenset({"repo", "rest", "first", "others", "px"})

    def test_global_excluded(self) -> None:
        tree = ast.parse("def f():\n    global g\n    g = 1\n    local = 2\n")
        func = tree.body[0]
        assert isinstance(func, ast.FunctionDef)
        assert collect_bindings(func.body) == frozenset({"local"})

    def test_parameter_names(self) -> None:
        func = ast.parse("def f(a, /, b, *args, c, **kwargs): pass").body[0]
        assert isinstance(func, ast.FunctionDef)
        assert parameter_names(func.args) == frozenset({"a", "b", "args", "c", "kwargs"})
