"""Routing data store backed by partitioned tables."""

from enum import Enum
from typing import List, Optional

from ..config import Settings
from ..db.connection import TableStorageConnection
from ..db.repositories.collection import CollectionStore
from ..exceptions import CorruptDataError, DuplicateKeyError, MalformedRecordError, StoreUnavailableError
from ..models import BotEndpoint, Connection, ConnectionRequest, EndpointReference, UserEndpoint
from ..utils.clock import SystemTimeProvider, TimeProvider
from ..utils.logger import get_app_logger, init_app_logger
from .codec import RecordCodec, connection_codec, connection_request_codec, endpoint_codec
from .keys import DEFAULT_PARTITION_KEY, connection_key, connection_request_key, endpoint_key


TABLE_BOT_INSTANCES = "BotInstances"
TABLE_USERS = "Users"
TABLE_AGGREGATION_CHANNELS = "AggregationChannels"
TABLE_CONNECTION_REQUESTS = "ConnectionRequests"
TABLE_CONNECTIONS = "Connections"


class StoreState(str, Enum):
    """Lifecycle of a routing data store."""

    PROVISIONING = "provisioning"
    READY = "ready"


class RoutingDataStore:
    """
    Stores endpoints, connection requests and connections in five tables.

    Bot endpoints go to the bot instances table and user endpoints to the
    users table. Aggregation channels, connection requests and connections
    each have a table of their own. All records of a table share one
    partition key; the row key is derived from the record (see keys.py).

    The tables are created in the constructor. A table that cannot be
    created is logged and skipped, so the first operation touching it
    raises StoreUnavailableError.

    One store may be shared by several threads; each statement runs on its
    own DuckDB cursor. Several stores in one process may open the same
    database file, but a DuckDB file accepts a single writing process, so
    replicas in separate processes cannot share the tables.
    """

    def __init__(
        self,
        connection_string: Optional[str],
        time_provider: Optional[TimeProvider] = None,
        partition_key: str = DEFAULT_PARTITION_KEY,
        table_prefix: str = ""
    ):
        """
        Args:
            connection_string: Backing store connection string
            time_provider: Source of the current time, system clock if omitted
            partition_key: Partition used by every collection
            table_prefix: Prefix for the physical table names

        Raises:
            ConfigurationError: If the connection string is missing or empty
            StoreUnavailableError: If the backing store cannot be opened
        """
        self.logger = get_app_logger()
        self.time_provider = time_provider or SystemTimeProvider()
        self.storage = TableStorageConnection(connection_string)

        def collection(name: str) -> CollectionStore:
            return CollectionStore(self.storage, table_prefix + name, partition_key, self.time_provider)

        self._bot_instances = collection(TABLE_BOT_INSTANCES)
        self._users = collection(TABLE_USERS)
        self._aggregation_channels = collection(TABLE_AGGREGATION_CHANNELS)
        self._connection_requests = collection(TABLE_CONNECTION_REQUESTS)
        self._connections = collection(TABLE_CONNECTIONS)

        self.state = StoreState.PROVISIONING
        self.provisioned_collections: List[str] = []
        self._provision()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        time_provider: Optional[TimeProvider] = None
    ) -> "RoutingDataStore":
        """
        Build a store from Settings (environment and .env by default).

        The store logger is configured from the same settings.
        """
        settings = settings or Settings()
        init_app_logger(settings)
        return cls(
            settings.routing_storage_connection_string,
            time_provider=time_provider,
            partition_key=settings.routing_partition_key,
            table_prefix=settings.routing_table_prefix
        )

    @property
    def collections(self) -> List[CollectionStore]:
        return [
            self._bot_instances,
            self._users,
            self._aggregation_channels,
            self._connection_requests,
            self._connections,
        ]

    @property
    def is_ready(self) -> bool:
        return self.state is StoreState.READY

    def _provision(self):
        """Make sure the required tables exist."""
        for store in self.collections:
            try:
                store.ensure_exists()
                self.provisioned_collections.append(store.table_name)
            except StoreUnavailableError as e:
                self.logger.error(f"Failed to create table '{store.table_name}': {e}")

        self.state = StoreState.READY
        self.logger.info(
            f"Routing data store ready ({len(self.provisioned_collections)}/{len(self.collections)} tables)"
        )

    # Endpoints

    def _endpoint_collection(self, endpoint: EndpointReference) -> CollectionStore:
        if isinstance(endpoint, BotEndpoint):
            return self._bot_instances
        if isinstance(endpoint, UserEndpoint):
            return self._users
        raise TypeError(f"Not an endpoint reference: {type(endpoint).__name__}")

    def add_endpoint(self, endpoint: EndpointReference) -> bool:
        """Add a bot instance or a user, depending on the endpoint kind."""
        return self._add(self._endpoint_collection(endpoint), endpoint_key(endpoint), endpoint_codec.encode(endpoint))

    def remove_endpoint(self, endpoint: EndpointReference) -> bool:
        return self._endpoint_collection(endpoint).delete(endpoint_key(endpoint))

    def list_bot_instances(self) -> List[EndpointReference]:
        return self._list(self._bot_instances, endpoint_codec)

    def list_users(self) -> List[EndpointReference]:
        return self._list(self._users, endpoint_codec)

    # Aggregation channels

    def add_aggregation_channel(self, channel: EndpointReference) -> bool:
        return self._add(self._aggregation_channels, endpoint_key(channel), endpoint_codec.encode(channel))

    def remove_aggregation_channel(self, channel: EndpointReference) -> bool:
        return self._aggregation_channels.delete(endpoint_key(channel))

    def list_aggregation_channels(self) -> List[EndpointReference]:
        return self._list(self._aggregation_channels, endpoint_codec)

    # Connection requests

    def create_connection_request(self, requestor: EndpointReference) -> ConnectionRequest:
        """Build a request stamped with the current time. Nothing is stored."""
        return ConnectionRequest(requestor=requestor, requested_at=self.time_provider.now())

    def add_connection_request(self, request: ConnectionRequest) -> bool:
        return self._add(
            self._connection_requests,
            connection_request_key(request),
            connection_request_codec.encode(request)
        )

    def remove_connection_request(self, request: ConnectionRequest) -> bool:
        return self._connection_requests.delete(connection_request_key(request))

    def list_connection_requests(self) -> List[ConnectionRequest]:
        return self._list(self._connection_requests, connection_request_codec)

    # Connections

    def create_connection(self, owner: EndpointReference, requestor: EndpointReference) -> Connection:
        """Build a connection with its last activity set to now. Nothing is stored."""
        return Connection(owner=owner, requestor=requestor, last_activity_at=self.time_provider.now())

    def add_connection(self, connection: Connection) -> bool:
        return self._add(self._connections, connection_key(connection), connection_codec.encode(connection))

    def remove_connection(self, connection: Connection) -> bool:
        return self._connections.delete(connection_key(connection))

    def list_connections(self) -> List[Connection]:
        return self._list(self._connections, connection_codec)

    def _add(self, store: CollectionStore, row_key: str, body: str) -> bool:
        try:
            return store.insert(row_key, body)
        except DuplicateKeyError as e:
            self.logger.debug(str(e))
            return False

    def _list(self, store: CollectionStore, codec: RecordCodec) -> list:
        records = []
        for stored in store.list_all():
            try:
                records.append(codec.decode(stored.body))
            except MalformedRecordError as e:
                self.logger.error(f"Corrupt record '{stored.row_key}' in {store.table_name}")
                raise CorruptDataError(store.table_name, stored.row_key, str(e)) from e
        return records

    def close(self):
        self.storage.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
