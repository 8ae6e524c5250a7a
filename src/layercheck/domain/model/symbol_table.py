"""Per-module name bindings used to qualify references."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class SymbolTable:
    """Local name → qualified name, built while one module is analyzed.

    Binding forms:
        import a.b          a        → a
        import a.b as m     m        → a.b
        from a import b     b        → a.b
        from a import b as c
                            c        → a.b
        class C / def f     C, f     → <module>.C, <module>.f

    ``from a import *`` only records ``a``: without analyzing ``a`` its
    exported names are unknown, so they stay unresolved.

    Later bindings replace earlier ones, as at runtime.
    """

    _bindings: dict[str, str] = field(default_factory=dict)
    _star_sources: list[str] = field(default_factory=list)

    def add_import(self, module: str, name: str | None, alias: str | None) -> None:
        """Record one imported name.

        Args:
            module: Absolute module (relative imports resolved beforehand)
            name: Name after ``import`` in a ``from`` statement, else None
            alias: Name after ``as``, if any

        Raises:
            ValueError: On an empty module or an empty (non-None) name
        """
        if not module:
            raise ValueError("import module must not be empty")

        match name:
            case "*":
                self._star_sources.append(module)
            case None:
                local = alias or module.partition(".")[0]
                self._bindings[local] = module if alias else local
            case "":
                raise ValueError("import name must be non-empty string or None")
            case _:
                self._bindings[alias or name] = f"{module}.{name}"

    def bind(self, local_name: str, qualified_name: str) -> None:
        """Record a name defined at module top level."""
        if not local_name or not qualified_name:
            raise ValueError("local_name and qualified_name must not be empty")
        self._bindings[local_name] = qualified_name

    def resolve(self, name: str) -> str | None:
        """Qualify a possibly dotted local name via its first segment.

        Returns None when the first segment is not bound here
        (builtins, star-imported names, typos).
        """
        if not name:
            raise ValueError("name must not be empty")
        head, dot, tail = name.partition(".")
        target = self._bindings.get(head)
        if target is None or not dot:
            return target
        return f"{target}.{tail}"

    def has_star_imports(self) -> bool:
        return bool(self._star_sources)

    @property
    def star_import_modules(self) -> tuple[str, ...]:
        return tuple(self._star_sources)

    @property
    def size(self) -> int:
        """Number of bound names."""
        return len(self._bindings)
