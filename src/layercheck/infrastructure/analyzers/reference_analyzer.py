"""Reference analyzer: which global names does a unit use?

Collects dotted name usages (calls, attribute reads/writes, construction,
annotations, bases, decorators) that are not bound locally. Resolution to
qualified names is left to the caller's symbol table.

Nested classes are separate units: their bodies are skipped. Classes
defined inside functions belong to the enclosing unit.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable

from layercheck.infrastructure.analyzers.base import (
    collect_bindings,
    dotted_name,
    parameter_names,
)


class ReferenceAnalyzer:
    """Extracts free dotted names used by a class or module.

    Stateless analyzer - no state between analyze_*() calls.
    """

    def analyze_class(self, node: ast.ClassDef) -> frozenset[str]:
        """Names used by a class: decorators, bases, keywords and body.

        Args:
            node: ClassDef AST node

        Returns:
            Dotted names as written (e.g. "repository.OrderRepository")
        """
        if node is None:
            raise TypeError("node must not be None")

        visitor = _ReferenceVisitor()
        visitor.visit_all(node.decorator_list)
        visitor.visit_all(node.bases)
        visitor.visit_all(node.keywords)
        visitor.class_scope = collect_bindings(node.body)
        visitor.visit_all(node.body)
        return frozenset(visitor.names)

    def analyze_module(self, tree: ast.Module) -> frozenset[str]:
        """Names used by module-level code and top-level functions.

        Args:
            tree: Parsed AST module

        Returns:
            Dotted names as written
        """
        if tree is None:
            raise TypeError("tree must not be None")

        visitor = _ReferenceVisitor()
        visitor.visit_all(tree.body)
        return frozenset(visitor.names)


class _ReferenceVisitor(ast.NodeVisitor):
    """Collects free names with function-scope tracking."""

    def __init__(self) -> None:
        self.names: set[str] = set()
        # Class-body names; invisible inside methods
        self.class_scope: frozenset[str] = frozenset()
        self._scopes: list[frozenset[str]] = []

    def visit_all(self, nodes: Iterable[ast.AST]) -> None:
        for node in nodes:
            self.visit(node)

    def _is_local(self, name: str) -> bool:
        if not self._scopes:
            return name in self.class_scope
        return any(name in scope for scope in self._scopes)

    def _add(self, dotted: str) -> None:
        root = dotted.split(".", 1)[0]
        if not self._is_local(root):
            self.names.add(dotted)

    # === Scopes ===

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        """Nested class: separate unit, unless local to a function."""
        if self._scopes:
            self.generic_visit(node)

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._visit_function(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._visit_function(node)

    def _visit_function(self, node: ast.FunctionDef | ast.AsyncFunctionDef) -> None:
        # Evaluated in the enclosing scope
        self.visit_all(node.decorator_list)
        self._visit_signature(node.args)
        if node.returns is not None:
            self._visit_annotation(node.returns)

        self._scopes.append(parameter_names(node.args) | collect_bindings(node.body))
        self.visit_all(node.body)
        self._scopes.pop()

    def visit_Lambda(self, node: ast.Lambda) -> None:
        self.visit_all(node.args.defaults)
        self.visit_all(d for d in node.args.kw_defaults if d is not None)
        self._scopes.append(parameter_names(node.args))
        self.visit(node.body)
        self._scopes.pop()

    def _visit_signature(self, args: ast.arguments) -> None:
        self.visit_all(args.defaults)
        self.visit_all(d for d in args.kw_defaults if d is not None)
        all_args = [*args.posonlyargs, *args.args, *args.kwonlyargs]
        if args.vararg is not None:
            all_args.append(args.vararg)
        if args.kwarg is not None:
            all_args.append(args.kwarg)
        for arg in all_args:
            if arg.annotation is not None:
                self._visit_annotation(arg.annotation)

    # === Annotations ===

    def visit_AnnAssign(self, node: ast.AnnAssign) -> None:
        self._visit_annotation(node.annotation)
        self.visit(node.target)
        if node.value is not None:
            self.visit(node.value)

    def _visit_annotation(self, node: ast.expr) -> None:
        """Visit annotation; a string annotation is parsed as an expression."""
        match node:
            case ast.Constant(value=str() as text):
                try:
                    parsed = ast.parse(text.strip(), mode="eval")
                except SyntaxError:
                    # Not a forward reference (free-form string annotation)
                    return
                self.visit(parsed.body)
            case _:
                self.visit(node)

    # === Usages ===

    def visit_Name(self, node: ast.Name) -> None:
        if isinstance(node.ctx, ast.Load):
            self._add(node.id)

    def visit_Attribute(self, node: ast.Attribute) -> None:
        dotted = dotted_name(node)
        if dotted is None:
            self.generic_visit(node)
            return
        self._add(dotted)
