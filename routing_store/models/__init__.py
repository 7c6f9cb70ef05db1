"""Pydantic models for routing records."""

from .endpoint import (
    BotEndpoint,
    ChannelAccount,
    ConversationAccount,
    EndpointReference,
    UserEndpoint,
)
from .connection import Connection, ConnectionRequest

__all__ = [
    "BotEndpoint",
    "ChannelAccount",
    "ConversationAccount",
    "EndpointReference",
    "UserEndpoint",
    "Connection",
    "ConnectionRequest",
]
