"""Services package."""

from .routing_data_store import RoutingDataStore, StoreState
from .codec import RecordCodec, endpoint_codec, connection_request_codec, connection_codec

__all__ = [
    "RoutingDataStore",
    "StoreState",
    "RecordCodec",
    "endpoint_codec",
    "connection_request_codec",
    "connection_codec",
]
