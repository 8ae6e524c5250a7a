"""Check run configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Directory names never scanned for units
DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        "venv",
        ".git",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        ".eggs",
    },
)


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Configuration for one check run.

    Built by the CLI from flags and by the pytest plugin from ini options.

    Attributes:
        source_dir: Import root to scan (e.g. "src")
        package: Package filter; only units under it are loaded
        exclude: Directory names to skip
        parallel: Evaluate rules concurrently (same output either way)
    """

    source_dir: Path
    package: str
    exclude: frozenset[str] = DEFAULT_EXCLUDES
    parallel: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.source_dir is None:
            raise TypeError("source_dir must not be None")
        if not self.package:
            raise ValueError("package must not be empty")
        if not isinstance(self.exclude, frozenset):
            raise TypeError(f"exclude must be frozenset, got {type(self.exclude).__name__}")
