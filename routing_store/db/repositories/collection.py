"""Collection store: one routing table, one partition."""

from datetime import datetime, timezone
from typing import Iterator, Optional

import duckdb

from .base import BaseRepository
from ..connection import TableStorageConnection, validate_table_name
from ..database_models.stored_record import StoredRecord
from ...exceptions import DuplicateKeyError, StoreUnavailableError
from ...utils.clock import SystemTimeProvider, TimeProvider


class CollectionStore(BaseRepository):
    """Insert, delete and enumerate the records of one physical table."""

    def __init__(
        self,
        storage: TableStorageConnection,
        table_name: str,
        partition_key: str,
        time_provider: Optional[TimeProvider] = None
    ):
        """
        Args:
            storage: Open table storage connection
            table_name: Physical table backing this collection
            partition_key: Partition shared by every record of the collection
            time_provider: Source of write timestamps, system clock if omitted
        """
        super().__init__(storage)
        self.table_name = validate_table_name(table_name)
        self.partition_key = partition_key
        self.time_provider = time_provider or SystemTimeProvider()

    def ensure_exists(self) -> bool:
        """
        Create the backing table if it is missing.

        Returns:
            True if the table was created, False if it already existed
        """
        created = self.storage.create_table_if_not_exists(self.table_name)
        if created:
            self.logger.info(f"Table '{self.table_name}' created")
        else:
            self.logger.info(f"Table '{self.table_name}' did already exist")
        return created

    def insert(self, row_key: str, body: str) -> bool:
        """
        Insert a record unless its key is taken.

        Args:
            row_key: Derived record identity
            body: Serialized record

        Returns:
            True once the record is written

        Raises:
            DuplicateKeyError: If the key already exists in the partition
            StoreUnavailableError: If the backing store fails
        """
        try:
            with self.storage.cursor() as cur:
                cur.execute(
                    f'INSERT INTO "{self.table_name}" (partition_key, row_key, body, timestamp) VALUES (?, ?, ?, ?)',
                    [self.partition_key, row_key, body, self._write_time()]
                )
        except duckdb.ConstraintException as e:
            raise DuplicateKeyError(self.table_name, self.partition_key, row_key) from e
        except duckdb.TransactionException as e:
            # A concurrent writer committed the same key first
            if self._exists(row_key):
                raise DuplicateKeyError(self.table_name, self.partition_key, row_key) from e
            self.logger.error(f"Failed to insert '{row_key}' into {self.table_name}: {e}")
            raise StoreUnavailableError(f"Insert into {self.table_name} failed: {e}") from e
        except duckdb.Error as e:
            self.logger.error(f"Failed to insert '{row_key}' into {self.table_name}: {e}")
            raise StoreUnavailableError(f"Insert into {self.table_name} failed: {e}") from e

        self.logger.debug(f"Inserted '{row_key}' into {self.table_name}")
        return True

    def delete(self, row_key: str) -> bool:
        """
        Delete a record by key.

        Returns:
            True if a record was removed, False if none existed
        """
        try:
            with self.storage.cursor() as cur:
                deleted = cur.execute(
                    f'DELETE FROM "{self.table_name}" WHERE partition_key = ? AND row_key = ? RETURNING row_key',
                    [self.partition_key, row_key]
                ).fetchall()
        except duckdb.Error as e:
            self.logger.error(f"Failed to delete '{row_key}' from {self.table_name}: {e}")
            raise StoreUnavailableError(f"Delete from {self.table_name} failed: {e}") from e

        if deleted:
            self.logger.debug(f"Deleted '{row_key}' from {self.table_name}")
        return bool(deleted)

    def list_all(self) -> Iterator[StoredRecord]:
        """
        Snapshot every record of the partition.

        The query runs when this method is called; the returned iterator
        can be consumed once. Order is unspecified.
        """
        try:
            with self.storage.cursor() as cur:
                rows = cur.execute(
                    f'SELECT partition_key, row_key, body, timestamp FROM "{self.table_name}" WHERE partition_key = ?',
                    [self.partition_key]
                ).fetchall()
        except duckdb.Error as e:
            self.logger.error(f"Failed to list {self.table_name}: {e}")
            raise StoreUnavailableError(f"Query on {self.table_name} failed: {e}") from e

        return (
            StoredRecord(partition_key=row[0], row_key=row[1], body=row[2], timestamp=row[3])
            for row in rows
        )

    def count(self) -> int:
        """Number of records in the partition."""
        try:
            with self.storage.cursor() as cur:
                result = cur.execute(
                    f'SELECT COUNT(*) FROM "{self.table_name}" WHERE partition_key = ?',
                    [self.partition_key]
                ).fetchone()
        except duckdb.Error as e:
            raise StoreUnavailableError(f"Count on {self.table_name} failed: {e}") from e
        return result[0]

    def _exists(self, row_key: str) -> bool:
        try:
            with self.storage.cursor() as cur:
                result = cur.execute(
                    f'SELECT COUNT(*) FROM "{self.table_name}" WHERE partition_key = ? AND row_key = ?',
                    [self.partition_key, row_key]
                ).fetchone()
        except duckdb.Error:
            return False
        return result[0] > 0

    def _write_time(self) -> datetime:
        now = self.time_provider.now()
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc).replace(tzinfo=None)
        return now
