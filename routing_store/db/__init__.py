"""Database package - connection, models, and repositories."""

from .connection import TableStorageConnection, parse_connection_string
from .database_models.stored_record import StoredRecord
from .repositories.collection import CollectionStore

__all__ = [
    "TableStorageConnection",
    "parse_connection_string",
    "StoredRecord",
    "CollectionStore",
]
