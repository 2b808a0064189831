"""Concrete service implementations."""

from .document_session import DocumentSession
from .file_service import FileService

__all__ = ["DocumentSession", "FileService"]
