"""Partition and row key derivation."""

from ..models import Connection, ConnectionRequest, EndpointReference


# Every record of a collection shares this partition
DEFAULT_PARTITION_KEY = "botHandOff"


def endpoint_key(endpoint: EndpointReference) -> str:
    return endpoint.conversation.id


def connection_request_key(request: ConnectionRequest) -> str:
    return request.requestor.conversation.id


def connection_key(connection: Connection) -> str:
    """
    Requestor conversation ID followed by owner conversation ID.

    The key is order dependent: swapping owner and requestor yields a
    different key. There is no separator, so distinct pairs can collide:
    requestor "ab" with owner "c" and requestor "a" with owner "bc" both
    map to "abc".
    """
    return connection.requestor.conversation.id + connection.owner.conversation.id
