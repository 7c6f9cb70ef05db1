"""Endpoint reference models."""

from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class ChannelAccount(BaseModel):
    """An account on a channel: a bot or a human user."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Account ID on the channel")
    name: Optional[str] = Field(None, description="Display name")


class ConversationAccount(BaseModel):
    """The conversation an endpoint lives in."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Stable conversation ID")
    name: Optional[str] = Field(None, description="Conversation name")
    is_group: Optional[bool] = Field(None, description="Whether the conversation has several members")


class _EndpointBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    conversation: ConversationAccount = Field(description="Conversation of this endpoint")
    channel_id: Optional[str] = Field(None, description="Channel the conversation runs on")
    service_url: Optional[str] = Field(None, description="Service URL for outbound messages")

    @property
    def conversation_id(self) -> str:
        return self.conversation.id


class BotEndpoint(_EndpointBase):
    """A bot instance taking part in a conversation."""

    kind: Literal["bot"] = "bot"
    bot: ChannelAccount = Field(description="Bot identity")

    @property
    def account_id(self) -> str:
        return self.bot.id


class UserEndpoint(_EndpointBase):
    """A human user taking part in a conversation."""

    kind: Literal["user"] = "user"
    user: ChannelAccount = Field(description="User identity")

    @property
    def account_id(self) -> str:
        return self.user.id


EndpointReference = Annotated[Union[BotEndpoint, UserEndpoint], Field(discriminator="kind")]
