"""Unit entity: one class or module of the analyzed codebase."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layercheck.domain.model.enums import UnitKind

if TYPE_CHECKING:
    from layercheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Unit:
    """Class or module with its outgoing references.

    Attributes:
        qualified_name: Full dotted name (pkg.controller.orders.OrderController)
        package: Namespace path the unit resides in. For a class this is the
            defining module; for a module it is the module itself.
        simple_name: Unqualified name (OrderController)
        kind: CLASS or MODULE
        references: Qualified names of referenced units (calls, attribute
            access, construction, type usage, inheritance)
        location: Definition site

    Examples:
        class in pkg/service/orders.py → Unit("pkg.service.orders.OrderService",
                                              "pkg.service.orders", "OrderService", CLASS, ...)
        module pkg/service/orders.py   → Unit("pkg.service.orders",
                                              "pkg.service.orders", "orders", MODULE, ...)
    """

    qualified_name: str
    package: str
    simple_name: str
    kind: UnitKind
    references: frozenset[str]
    location: Location

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")
        if not self.package:
            raise ValueError("package must not be empty")
        if not self.simple_name:
            raise ValueError("simple_name must not be empty")
        if not isinstance(self.references, frozenset):
            raise TypeError(f"references must be frozenset, got {type(self.references).__name__}")

        if not self.qualified_name.endswith(self.simple_name):
            raise ValueError(
                f"qualified_name '{self.qualified_name}' must end with '{self.simple_name}'"
            )

        match self.kind:
            case UnitKind.MODULE if self.qualified_name != self.package:
                raise ValueError(
                    f"module unit '{self.qualified_name}' must reside in itself, "
                    f"got package '{self.package}'"
                )
            case UnitKind.CLASS if not self.qualified_name.startswith(self.package + "."):
                raise ValueError(
                    f"class unit '{self.qualified_name}' is not inside package '{self.package}'"
                )

    @property
    def is_class(self) -> bool:
        """True for class units."""
        return self.kind is UnitKind.CLASS

    @property
    def is_module(self) -> bool:
        """True for module units."""
        return self.kind is UnitKind.MODULE

    def __str__(self) -> str:
        return f"{self.kind.value} <{self.qualified_name}>"
