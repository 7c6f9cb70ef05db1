"""JSON codec for routing records."""

from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

from ..exceptions import MalformedRecordError
from ..models import Connection, ConnectionRequest, EndpointReference


T = TypeVar("T")


class RecordCodec(Generic[T]):
    """Serializes one record type to JSON text and back."""

    def __init__(self, record_type: Any, name: str):
        self.name = name
        self._adapter: TypeAdapter = TypeAdapter(record_type)

    def encode(self, record: T) -> str:
        return self._adapter.dump_json(record).decode("utf-8")

    def decode(self, text: str) -> T:
        """
        Parse a stored body.

        Raises:
            MalformedRecordError: If the text is not a serialized record of this type
        """
        if not isinstance(text, (str, bytes)):
            raise MalformedRecordError(f"Expected JSON text for {self.name}, got {type(text).__name__}")
        try:
            return self._adapter.validate_json(text)
        except ValueError as e:
            raise MalformedRecordError(f"Invalid {self.name}: {e}") from e


endpoint_codec: RecordCodec[EndpointReference] = RecordCodec(EndpointReference, "endpoint reference")
connection_request_codec: RecordCodec[ConnectionRequest] = RecordCodec(ConnectionRequest, "connection request")
connection_codec: RecordCodec[Connection] = RecordCodec(Connection, "connection")
