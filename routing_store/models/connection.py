"""Connection request and connection models."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .endpoint import EndpointReference


class ConnectionRequest(BaseModel):
    """A pending request from an endpoint to be connected to a counterpart."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    requestor: EndpointReference = Field(description="Endpoint asking for a connection")
    requested_at: datetime = Field(description="When the request was made")


class Connection(BaseModel):
    """
    An established pairing of two endpoints.

    The owner is the endpoint that accepted the request (an agent, for
    instance) and the requestor is the endpoint that asked for it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    owner: EndpointReference = Field(description="Endpoint owning the connection")
    requestor: EndpointReference = Field(description="Endpoint that requested the connection")
    last_activity_at: Optional[datetime] = Field(None, description="Last message relayed over this connection")
