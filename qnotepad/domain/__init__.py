"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import IAppConfig, IFileService, ITextSurface
from .models import Document

__all__ = [
    "IFileService",
    "ITextSurface",
    "IAppConfig",
    "Document",
]
