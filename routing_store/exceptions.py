"""Exceptions raised by the routing data store."""

from typing import Optional


class RoutingStoreError(Exception):
    """Base class for all routing store errors."""


class ConfigurationError(RoutingStoreError):
    """Connection string is missing, empty or not understood."""


class DuplicateKeyError(RoutingStoreError):
    """A record with the same partition and row key already exists."""

    def __init__(self, table: str, partition_key: str, row_key: str):
        self.table = table
        self.partition_key = partition_key
        self.row_key = row_key
        super().__init__(
            f"Record '{row_key}' already exists in {table} (partition '{partition_key}')"
        )


class StoreUnavailableError(RoutingStoreError):
    """The backing store failed or the target table does not exist."""


class MalformedRecordError(RoutingStoreError):
    """Text is not a valid serialized form of the expected record type."""


class CorruptDataError(RoutingStoreError):
    """A stored body could not be decoded while listing a collection."""

    def __init__(self, table: str, row_key: Optional[str], reason: str):
        self.table = table
        self.row_key = row_key
        super().__init__(f"Corrupt record '{row_key}' in {table}: {reason}")
