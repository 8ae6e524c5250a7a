"""Definition site of a unit."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Where a class or module is defined.

    Modules are located at line 1, column 0.

    Attributes:
        file: Source file
        line: 1-based line
        column: 0-based column
    """

    file: Path
    line: int
    column: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def as_dict(self) -> dict[str, object]:
        """JSON-friendly form: file as str, line, column."""
        return {"file": str(self.file), "line": self.line, "column": self.column}

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
