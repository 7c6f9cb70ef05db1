"""Repository layer for data access."""

from .base import BaseRepository
from .collection import CollectionStore

__all__ = ["BaseRepository", "CollectionStore"]
