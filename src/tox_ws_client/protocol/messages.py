"""Inbound message definitions.

Everything the daemon sends is one of two things:
- Response: the answer to the oldest outstanding request (has a `response` field)
- Notification: a daemon-initiated event (has an `event` field)

Both are kept verbatim. Beyond the discriminant field the payload is
opaque to the client and is only ever displayed.
"""

from __future__ import annotations

import json
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, PrivateAttr


class MessageParseError(ValueError):
    """Raised when an inbound payload is not a routable message."""


class InboundMessage(BaseModel):
    """Common base for daemon messages.

    Unknown fields are preserved so that the raw payload can be
    serialized back for display.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    # Payload as received, keys in arrival order
    _payload: dict[str, Any] | None = PrivateAttr(default=None)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> Self:
        """Validate a decoded payload and remember it for display."""
        message = cls.model_validate(data)
        message._payload = data
        return message

    def to_json(self) -> str:
        """Serialize back to compact JSON, preserving the received key order."""
        data = self._payload if self._payload is not None else self.model_dump()
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


class Response(InboundMessage):
    """A response correlated with the oldest pending request.

    Example:
        {"response": "Info", "tox_id": "56A1...", "name": "alice"}
    """

    response: Any


class Notification(InboundMessage):
    """An event the daemon generated on its own.

    Example:
        {"event": "FriendMessage", "friend": 0, "kind": "Normal", "message": "hi"}
    """

    event: Any


def parse_message(raw: str | bytes) -> Response | Notification:
    """Decode a raw payload into a Response or a Notification.

    A payload carrying a `response` field is a Response, even if it also
    carries an `event` field.

    Raises:
        MessageParseError: If the payload is not JSON, not an object, or
            carries neither discriminant.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MessageParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MessageParseError(f"Expected a JSON object, got {type(data).__name__}")

    if "response" in data:
        return Response.from_payload(data)
    if "event" in data:
        return Notification.from_payload(data)

    raise MessageParseError("Message has neither 'response' nor 'event' field")
