"""Codebase model: immutable snapshot of all units under a package."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.unit import Unit


@dataclass(frozen=True, slots=True)
class CodebaseModel:
    """Point-in-time snapshot of all units in a package subtree.

    Built once per check run, never mutated afterwards. Units are kept
    in qualified-name order behind a read-only mapping.

    Invariants (FAIL-FIRST):
        - For each (key, unit) in units: key == unit.qualified_name
        - Every module unit is listed in modules

    Attributes:
        root_path: Import root the model was loaded from
        package_filter: Package prefix that selected the units
        units: Qualified name -> Unit mapping (read-only)
        modules: Dotted names of all modules in the model
    """

    root_path: Path
    package_filter: str
    units: Mapping[str, Unit] = field(default_factory=dict)
    modules: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants and freeze unit mapping. FAIL-FIRST."""
        for key, unit in self.units.items():
            if key != unit.qualified_name:
                raise ValueError(
                    f"unit name {unit.qualified_name!r} does not match key {key!r}"
                )
            if unit.is_module and key not in self.modules:
                raise ValueError(f"module unit {key!r} missing from modules")

        ordered = {name: self.units[name] for name in sorted(self.units)}
        object.__setattr__(self, "units", MappingProxyType(ordered))

    @classmethod
    def from_units(
        cls,
        units: Iterable[Unit],
        *,
        root_path: Path | None = None,
        package_filter: str = "",
    ) -> CodebaseModel:
        """Build model from units, deriving module names.

        Raises:
            ValueError: If two units share a qualified name
        """
        by_name: dict[str, Unit] = {}
        modules: set[str] = set()
        for unit in units:
            if unit.qualified_name in by_name:
                raise ValueError(f"duplicate unit {unit.qualified_name!r}")
            by_name[unit.qualified_name] = unit
            modules.add(unit.package)

        return cls(
            root_path=root_path if root_path is not None else Path(),
            package_filter=package_filter,
            units=by_name,
            modules=frozenset(modules),
        )

    @classmethod
    def empty(cls) -> CodebaseModel:
        """Create empty model (no units): every rule passes vacuously."""
        return cls(root_path=Path(), package_filter="")

    def get_unit(self, qualified_name: str) -> Unit | None:
        """Get unit by qualified name. Returns None if not in model."""
        return self.units.get(qualified_name)

    def iter_units(self) -> Iterator[Unit]:
        """Iterate units in qualified-name order."""
        return iter(self.units.values())

    def package_of(self, qualified_name: str) -> str:
        """Package the named unit resides in.

        Units inside the model report their own package. Modules of the
        model reside in themselves. For external names the parent
        namespace is used (best effort: last segment taken as the unit).
        """
        if not qualified_name:
            raise ValueError("qualified_name must not be empty")

        unit = self.units.get(qualified_name)
        if unit is not None:
            return unit.package
        if qualified_name in self.modules:
            return qualified_name

        parent, _, _ = qualified_name.rpartition(".")
        return parent or qualified_name

    def __len__(self) -> int:
        return len(self.units)

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self.units
