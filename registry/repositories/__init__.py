"""Repository layer for data access."""

from registry.repositories.file_repository import FileRepository
from registry.repositories.counter_repository import CounterRepository

__all__ = [
    "FileRepository",
    "CounterRepository",
]
