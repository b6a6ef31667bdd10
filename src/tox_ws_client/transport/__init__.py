"""Duplex channels to the Tox daemon.

- Channel: the protocol every channel implements
- WebSocketChannel: the production channel
- MockChannel: in-memory channel for tests
"""

from .base import Channel, ChannelState
from .mock import MockChannel
from .websocket import WebSocketChannel

__all__ = [
    "Channel",
    "ChannelState",
    "MockChannel",
    "WebSocketChannel",
]
