"""Infrastructure adapters for external interfaces."""

from layercheck.infrastructure.adapters.ast_loader import ASTModelLoader, load_model

__all__ = [
    "ASTModelLoader",
    "load_model",
]
