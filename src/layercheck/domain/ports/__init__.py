"""Domain ports (interfaces/protocols)."""

from layercheck.domain.ports.model_loader import ModelLoaderPort
from layercheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "ModelLoaderPort",
    "ReporterProtocol",
]
