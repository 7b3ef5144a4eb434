"""Service layer for registry operations."""

from registry.services.file_registry import FileRegistry

__all__ = [
    "FileRegistry",
]
