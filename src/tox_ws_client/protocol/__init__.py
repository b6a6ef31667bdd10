"""Daemon wire protocol.

Requests go out, responses and notifications come in, all over a single
duplex channel as JSON text frames.

Key concepts:
- Requests: client → daemon, tagged by the `request` field
- Responses: daemon → client, tagged by the `response` field, matched to
  requests strictly in send order
- Notifications: daemon → client, tagged by the `event` field, never
  matched to a request
"""

from .messages import MessageParseError, Notification, Response, parse_message
from .requests import (
    AddFriendNoRequest,
    AddFriendRequest,
    InfoRequest,
    MessageKind,
    Request,
    SendFriendMessageRequest,
    add_friend_request,
)

__all__ = [
    "AddFriendNoRequest",
    "AddFriendRequest",
    "InfoRequest",
    "MessageKind",
    "MessageParseError",
    "Notification",
    "Request",
    "Response",
    "SendFriendMessageRequest",
    "add_friend_request",
    "parse_message",
]
