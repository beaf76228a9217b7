"""Messages exchanged over the realtime WebSocket hub."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


def utc_timestamp() -> str:
    """RFC 3339 timestamp in UTC, e.g. ``2024-05-01T12:00:00Z``."""

    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


class CalculationMessage(BaseModel):
    """A calculation performed by one of the clients."""

    type: Literal["calculation"] = "calculation"
    operation: str
    result: float
    timestamp: str = Field(default_factory=utc_timestamp)


class ChatMessage(BaseModel):
    type: Literal["chat"] = "chat"
    user: str
    message: str
    timestamp: str = Field(default_factory=utc_timestamp)


class SystemMessage(BaseModel):
    """Server-originated notice such as a welcome or startup message."""

    type: Literal["system"] = "system"
    message: str
    timestamp: str = Field(default_factory=utc_timestamp)


class PingMessage(BaseModel):
    type: Literal["ping"] = "ping"


class PongMessage(BaseModel):
    type: Literal["pong"] = "pong"


RealtimeMessage = Annotated[
    Union[CalculationMessage, ChatMessage, SystemMessage, PingMessage, PongMessage],
    Field(discriminator="type"),
]

realtime_message_adapter = TypeAdapter(RealtimeMessage)
