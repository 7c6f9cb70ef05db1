"""Shared fixtures for routing store tests."""

from datetime import datetime, timezone

import pytest

from routing_store.models import BotEndpoint, ChannelAccount, ConversationAccount, UserEndpoint
from routing_store.services.routing_data_store import RoutingDataStore


FIXED_NOW = datetime(2025, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


class FixedClock:
    """Time provider that always returns the same instant."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.current = now

    def now(self) -> datetime:
        return self.current


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def db_url(tmp_path):
    """Connection string for a fresh database file."""
    return f"duckdb://{tmp_path / 'routing.db'}"


@pytest.fixture
def store(db_url, clock):
    """Provide a provisioned RoutingDataStore."""
    s = RoutingDataStore(db_url, time_provider=clock)
    yield s
    s.close()


@pytest.fixture
def make_bot():
    """Factory for BotEndpoint."""
    def _make(conversation_id="conv-bot", bot_id="bot-1", **overrides):
        fields = dict(
            conversation=ConversationAccount(id=conversation_id),
            bot=ChannelAccount(id=bot_id, name="Hand-off bot"),
            channel_id="msteams",
            service_url="https://smba.example.net/emea/",
        )
        fields.update(overrides)
        return BotEndpoint(**fields)
    return _make


@pytest.fixture
def make_user():
    """Factory for UserEndpoint."""
    def _make(conversation_id="conv-user", user_id="user-1", **overrides):
        fields = dict(
            conversation=ConversationAccount(id=conversation_id),
            user=ChannelAccount(id=user_id, name="Alex"),
            channel_id="webchat",
        )
        fields.update(overrides)
        return UserEndpoint(**fields)
    return _make
