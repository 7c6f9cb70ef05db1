"""Persistence of conversation hand-off routing state."""

from .exceptions import (
    ConfigurationError,
    CorruptDataError,
    DuplicateKeyError,
    MalformedRecordError,
    RoutingStoreError,
    StoreUnavailableError,
)
from .models import (
    BotEndpoint,
    ChannelAccount,
    Connection,
    ConnectionRequest,
    ConversationAccount,
    EndpointReference,
    UserEndpoint,
)
from .services.routing_data_store import RoutingDataStore, StoreState

__all__ = [
    "ConfigurationError",
    "CorruptDataError",
    "DuplicateKeyError",
    "MalformedRecordError",
    "RoutingStoreError",
    "StoreUnavailableError",
    "BotEndpoint",
    "ChannelAccount",
    "Connection",
    "ConnectionRequest",
    "ConversationAccount",
    "EndpointReference",
    "UserEndpoint",
    "RoutingDataStore",
    "StoreState",
]
