"""Import statement analyzer: module AST → SymbolTable."""

from __future__ import annotations

import ast

from layercheck.domain.model.symbol_table import SymbolTable
from layercheck.infrastructure.analyzers.base import collect_bindings, resolve_relative_import


class ImportAnalyzer:
    """Builds the symbol table of one module.

    Stateless analyzer - no state between analyze() calls.

    Module-level definitions are bound first, then every import in the
    module (top-level, conditional, TYPE_CHECKING and function-local)
    is registered. A later binding of the same local name wins.
    """

    def analyze(self, tree: ast.Module, module_name: str, *, is_package: bool) -> SymbolTable:
        """Build symbol table for module.

        Args:
            tree: Parsed AST module
            module_name: Fully qualified module name
            is_package: Module comes from an __init__.py

        Returns:
            SymbolTable mapping local names to qualified names

        Raises:
            ValueError: If a relative import escapes the package
        """
        if not module_name:
            raise ValueError("module_name must be non-empty string")

        symbol_table = SymbolTable()

        for name in sorted(collect_bindings(tree.body)):
            symbol_table.bind(name, f"{module_name}.{name}")

        for node in ast.walk(tree):
            match node:
                case ast.Import(names=aliases):
                    for alias in aliases:
                        symbol_table.add_import(alias.name, None, alias.asname)

                case ast.ImportFrom(module=module, level=level, names=aliases):
                    resolved = resolve_relative_import(
                        module, level, module_name, is_package=is_package
                    )
                    for alias in aliases:
                        symbol_table.add_import(resolved, alias.name, alias.asname)

        return symbol_table
