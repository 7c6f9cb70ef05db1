"""Base repository class."""

from ..connection import TableStorageConnection
from ...utils.logger import get_app_logger


class BaseRepository:
    """Base class for all repositories."""

    def __init__(self, storage: TableStorageConnection):
        """
        Initialize repository with a storage connection.

        Args:
            storage: Open table storage connection
        """
        self.storage = storage
        self.logger = get_app_logger()
