"""Backing store connection and table management."""

import re
import duckdb
from typing import Optional
from pathlib import Path

from ..exceptions import ConfigurationError, StoreUnavailableError
from ..utils.logger import get_app_logger


SCHEME = "duckdb://"
MEMORY = ":memory:"

_TABLE_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9_]{0,62}$")

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS "{name}" (
        partition_key VARCHAR NOT NULL,
        row_key VARCHAR NOT NULL,
        body VARCHAR NOT NULL,
        timestamp TIMESTAMP NOT NULL,
        PRIMARY KEY (partition_key, row_key)
    )
"""


def parse_connection_string(connection_string: Optional[str]) -> str:
    """
    Resolve a connection string to a DuckDB database location.

    Accepted forms are ``duckdb:///abs/path.db``, ``duckdb://rel/path.db``,
    ``duckdb://:memory:`` and a bare path or ``:memory:``.

    Args:
        connection_string: Connection string to resolve

    Returns:
        Database path or ``:memory:``

    Raises:
        ConfigurationError: If the string is missing, empty or has another scheme
    """
    if connection_string is None or not connection_string.strip():
        raise ConfigurationError("The connection string cannot be null or empty")

    value = connection_string.strip()
    if value.startswith(SCHEME):
        value = value[len(SCHEME):]
        if not value:
            raise ConfigurationError(f"No database given in connection string '{connection_string}'")
    elif "://" in value:
        raise ConfigurationError(f"Unsupported connection string scheme: '{connection_string}'")

    return value


def validate_table_name(name: str) -> str:
    """Table names are alphanumeric (underscores allowed) and start with a letter."""
    if not _TABLE_NAME.match(name):
        raise ConfigurationError(f"Invalid table name: '{name}'")
    return name


class TableStorageConnection:
    """DuckDB-backed table storage connection."""

    def __init__(self, connection_string: Optional[str]):
        """
        Open the backing store.

        Args:
            connection_string: See parse_connection_string

        Raises:
            ConfigurationError: If the connection string is not usable
            StoreUnavailableError: If the database cannot be opened
        """
        self.db_path = parse_connection_string(connection_string)
        self.logger = get_app_logger()
        self.conn: Optional[duckdb.DuckDBPyConnection] = None

        if self.db_path != MEMORY:
            db_dir = Path(self.db_path).parent
            db_dir.mkdir(parents=True, exist_ok=True)

        self._connect()

    def _connect(self):
        """Connect to DuckDB database."""
        try:
            self.conn = duckdb.connect(self.db_path)
            self.logger.info(f"Connected to DuckDB at {self.db_path}")
        except duckdb.Error as e:
            self.logger.error(f"Failed to connect to DuckDB: {e}")
            raise StoreUnavailableError(f"Cannot open {self.db_path}: {e}") from e

    def cursor(self) -> duckdb.DuckDBPyConnection:
        """
        Open a cursor on the shared database.

        A DuckDB connection must not be used by several threads at once, so
        every statement runs on a cursor of its own.
        """
        return self.conn.cursor()

    def table_exists(self, name: str) -> bool:
        """Check whether a table is present."""
        try:
            with self.cursor() as cur:
                result = cur.execute(
                    "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = ?",
                    [name]
                ).fetchone()
        except duckdb.Error as e:
            raise StoreUnavailableError(f"Cannot inspect table {name}: {e}") from e
        return result[0] > 0

    def create_table_if_not_exists(self, name: str) -> bool:
        """
        Create a routing table unless it already exists.

        Args:
            name: Table name

        Returns:
            True if the table was created, False if it was already there

        Raises:
            StoreUnavailableError: If the backing store rejects the statement
        """
        validate_table_name(name)
        existed = self.table_exists(name)
        try:
            with self.cursor() as cur:
                cur.execute(_CREATE_TABLE.format(name=name))
        except duckdb.Error as e:
            raise StoreUnavailableError(f"Cannot create table {name}: {e}") from e
        return not existed

    def close(self):
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.logger.info("Database connection closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
