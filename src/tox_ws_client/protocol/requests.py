"""Request definitions for the daemon protocol.

Requests are sent from the client to the Tox daemon. The daemon answers
each request with exactly one response, in the order the requests were
sent. There is no request id on the wire: correlation is positional.

Wire format (one JSON object per WebSocket text frame):
    {"request": "Info"}
    {"request": "AddFriend", "tox_id": "...", "message": "..."}
    {"request": "AddFriendNorequest", "tox_id": "..."}
    {"request": "SendFriendMessage", "friend": 0, "kind": "Normal", "message": "..."}
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict


class MessageKind(str, Enum):
    """Kind of a friend message."""

    NORMAL = "Normal"
    ACTION = "Action"


class BaseRequest(BaseModel):
    """Common base for all requests.

    Requests are immutable once constructed and only live long enough
    to be serialized.
    """

    model_config = ConfigDict(frozen=True)

    request: str

    def to_json(self) -> str:
        """Serialize to the wire format."""
        return self.model_dump_json()


class InfoRequest(BaseRequest):
    """Ask the daemon for our own name and Tox ID."""

    request: Literal["Info"] = "Info"


class AddFriendRequest(BaseRequest):
    """Add a friend and send them a friend request message."""

    request: Literal["AddFriend"] = "AddFriend"
    tox_id: str
    message: str


class AddFriendNoRequest(BaseRequest):
    """Add a friend without sending a friend request."""

    request: Literal["AddFriendNorequest"] = "AddFriendNorequest"
    tox_id: str


class SendFriendMessageRequest(BaseRequest):
    """Send a chat message to a friend."""

    request: Literal["SendFriendMessage"] = "SendFriendMessage"
    friend: int
    kind: MessageKind = MessageKind.NORMAL
    message: str


Request = InfoRequest | AddFriendRequest | AddFriendNoRequest | SendFriendMessageRequest


def add_friend_request(tox_id: str, message: str | None = None) -> Request:
    """Build the request for adding a friend.

    With a message a friend request is sent; without one the friend is
    added silently.
    """
    if message is not None:
        return AddFriendRequest(tox_id=tox_id, message=message)
    return AddFriendNoRequest(tox_id=tox_id)
