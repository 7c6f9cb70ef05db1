"""Tests for the record codecs."""

import json

import pytest

from routing_store.exceptions import MalformedRecordError
from routing_store.models import BotEndpoint, Connection, ConnectionRequest, UserEndpoint
from routing_store.services.codec import connection_codec, connection_request_codec, endpoint_codec

from conftest import FIXED_NOW


class TestEndpointCodec:
    """SUT: endpoint_codec"""

    def test_round_trip_bot(self, make_bot):
        bot = make_bot()
        decoded = endpoint_codec.decode(endpoint_codec.encode(bot))
        assert isinstance(decoded, BotEndpoint)
        assert decoded == bot

    def test_round_trip_user(self, make_user):
        user = make_user()
        decoded = endpoint_codec.decode(endpoint_codec.encode(user))
        assert isinstance(decoded, UserEndpoint)
        assert decoded == user

    def test_encoded_form_is_tagged_json(self, make_user):
        data = json.loads(endpoint_codec.encode(make_user()))
        assert data["kind"] == "user"
        assert data["conversation"]["id"] == "conv-user"
        assert data["user"]["id"] == "user-1"

    @pytest.mark.parametrize("text", [
        "",
        "not json",
        "[]",
        '{"kind": "user", "conversation": {"id": "c1"}}',
        '{"conversation": {"id": "c1"}, "user": {"id": "u1"}}',
    ])
    def test_malformed(self, text):
        with pytest.raises(MalformedRecordError):
            endpoint_codec.decode(text)

    def test_not_text(self):
        with pytest.raises(MalformedRecordError):
            endpoint_codec.decode(None)


class TestConnectionRequestCodec:
    """SUT: connection_request_codec"""

    def test_round_trip(self, make_user):
        request = ConnectionRequest(requestor=make_user(), requested_at=FIXED_NOW)
        assert connection_request_codec.decode(connection_request_codec.encode(request)) == request

    def test_wrong_type(self, make_user):
        """A serialized endpoint is not a connection request."""
        with pytest.raises(MalformedRecordError):
            connection_request_codec.decode(endpoint_codec.encode(make_user()))


class TestConnectionCodec:
    """SUT: connection_codec"""

    def test_round_trip(self, make_bot, make_user):
        connection = Connection(owner=make_bot(), requestor=make_user(), last_activity_at=FIXED_NOW)
        decoded = connection_codec.decode(connection_codec.encode(connection))
        assert decoded == connection
        assert isinstance(decoded.owner, BotEndpoint)
        assert isinstance(decoded.requestor, UserEndpoint)

    def test_round_trip_without_activity(self, make_user):
        connection = Connection(owner=make_user(conversation_id="agent"), requestor=make_user())
        assert connection_codec.decode(connection_codec.encode(connection)) == connection
