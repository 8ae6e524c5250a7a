"""Domain enumerations."""

from enum import Enum


class UnitKind(Enum):
    """Kind of code unit in the codebase model."""

    CLASS = "class"  # class definition, nested classes included
    MODULE = "module"  # module-level code and top-level functions
