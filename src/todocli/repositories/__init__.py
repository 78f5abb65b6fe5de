"""Repository layer for data access."""

from .filesystem import JsonFileRepository
from .protocol import RepositoryProtocol

__all__ = [
    "JsonFileRepository",
    "RepositoryProtocol",
]
