"""AST helpers shared by the import and reference analyzers."""

from __future__ import annotations

import ast
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from layercheck.domain.model.location import Location

if TYPE_CHECKING:
    from pathlib import Path

_SCOPE_NODES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef, ast.Lambda)


def make_location(node: ast.stmt, path: Path) -> Location:
    """Location of a statement in path."""
    return Location(file=path, line=node.lineno, column=node.col_offset)


def compute_module_name(file_path: Path, root_path: Path) -> str | None:
    """Dotted module name of a source file relative to the import root.

    Examples:
        /src/shop/orders.py, /src          → shop.orders
        /src/shop/__init__.py, /src        → shop
        /src/__init__.py, /src             → None (root is not a package)
        /src/my-shop/orders.py, /src       → None (not importable)

    Raises:
        ValueError: If file_path lies outside root_path
    """
    *packages, stem = file_path.relative_to(root_path).with_suffix("").parts
    segments = packages if stem == "__init__" else [*packages, stem]
    if segments and all(segment.isidentifier() for segment in segments):
        return ".".join(segments)
    return None


def resolve_relative_import(
    node_module: str | None,
    node_level: int,
    current_module: str,
    *,
    is_package: bool = False,
) -> str:
    """Turn the target of ``from <dots><module> import ...`` into an absolute name.

    Args:
        node_module: Text after the dots, None for ``from . import x``
        node_level: Number of leading dots, 0 for absolute imports
        current_module: Module containing the import
        is_package: current_module is an ``__init__``, so one dot is itself

    Returns:
        Absolute dotted module name

    Raises:
        ValueError: If the dots climb above the top-level package
    """
    if not node_level:
        if node_module is None:
            raise ValueError("absolute import must have module")
        return node_module

    anchor = current_module.split(".")
    depth = len(anchor) if is_package else len(anchor) - 1
    if node_level > depth:
        raise ValueError(
            f"relative import level {node_level} exceeds package depth "
            f"of module '{current_module}'"
        )

    base = anchor[: depth - node_level + 1]
    return ".".join([*base, node_module] if node_module else base)


def dotted_name(node: ast.expr) -> str | None:
    """Full dotted name of a Name/Attribute chain.

    Examples:
        repo                → "repo"
        orders.repo.find    → "orders.repo.find"
        get_repo().find     → None (chain not rooted at a name)
    """
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(value=value, attr=attr):
            base = dotted_name(value)
            return f"{base}.{attr}" if base is not None else None
    return None


def shallow_walk(body: Iterable[ast.AST]) -> Iterator[ast.AST]:
    """Pre-order walk of one scope.

    Function, class and lambda nodes are yielded, but their bodies belong
    to another scope and are not visited.
    """
    pending: list[ast.AST] = [*body][::-1]
    while pending:
        node = pending.pop()
        yield node
        if not isinstance(node, _SCOPE_NODES):
            pending.extend([*ast.iter_child_nodes(node)][::-1])


def collect_bindings(body: Iterable[ast.AST]) -> frozenset[str]:
    """Collect all names bound in one scope (minus `global` declarations).

    Bound names include assignment, loop, with, except and walrus targets,
    comprehension variables, match captures and nested function/class names.
    Imports are left to the symbol table.
    AugAssign does NOT bind (x += 1 requires x to exist).
    """
    bound: set[str] = set()
    global_decls: set[str] = set()

    for node in shallow_walk(body):
        match node:
            case ast.Global(names=names) | ast.Nonlocal(names=names):
                global_decls.update(names)

            case ast.Assign(targets=targets):
                for target in targets:
                    _extract_target_names(target, bound)

            case ast.AnnAssign(target=target):
                _extract_target_names(target, bound)

            case ast.For(target=target) | ast.AsyncFor(target=target):
                _extract_target_names(target, bound)

            case ast.With(items=items) | ast.AsyncWith(items=items):
                for item in items:
                    if item.optional_vars:
                        _extract_target_names(item.optional_vars, bound)

            case ast.ExceptHandler(name=name) if name is not None:
                bound.add(name)

            case ast.NamedExpr(target=ast.Name(id=name)):
                bound.add(name)

            case ast.comprehension(target=target):
                _extract_target_names(target, bound)

            case ast.MatchAs(name=str() as name) | ast.MatchStar(name=str() as name):
                bound.add(name)

            case ast.MatchMapping(rest=str() as rest):
                bound.add(rest)

            case ast.FunctionDef(name=name) | ast.AsyncFunctionDef(name=name):
                bound.add(name)

            case ast.ClassDef(name=name):
                bound.add(name)

    return frozenset(bound - global_decls)


def parameter_names(args: ast.arguments) -> frozenset[str]:
    """Names of all parameters in a signature (including *args, **kwargs)."""
    names = {a.arg for a in (*args.posonlyargs, *args.args, *args.kwonlyargs)}
    if args.vararg is not None:
        names.add(args.vararg.arg)
    if args.kwarg is not None:
        names.add(args.kwarg.arg)
    return frozenset(names)


def _extract_target_names(target: ast.expr, names: set[str]) -> None:
    """Extract variable names from assignment target.

    Attribute and Subscript targets do not bind names.
    """
    match target:
        case ast.Name(id=name):
            names.add(name)
        case ast.Tuple(elts=elts) | ast.List(elts=elts):
            for elt in elts:
                _extract_target_names(elt, names)
        case ast.Starred(value=value):
            _extract_target_names(value, names)
