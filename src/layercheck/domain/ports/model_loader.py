"""Codebase model loader port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layercheck.domain.model.codebase import CodebaseModel


class ModelLoaderPort(ABC):
    """Port for building a CodebaseModel from a source tree.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def load(self, root_path: Path, package_filter: str) -> CodebaseModel:
        """Load all units under package_filter found below root_path.

        Args:
            root_path: Import root of the source tree
            package_filter: Package prefix selecting units

        Returns:
            Immutable, non-empty CodebaseModel

        Raises:
            LoadError: Root missing/unreadable, unparsable file, or no units
        """
        ...
