"""Duplex channel abstraction.

The client talks to the daemon over a single message-oriented, text
payload channel. Implementations handle connection management and
framing; the client only ever sees whole text messages.

Key difference from a request/response transport:
- A channel knows nothing about correlation
- Inbound messages are yielded in arrival order, one at a time
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from enum import Enum
from typing import Protocol, runtime_checkable


class ChannelState(str, Enum):
    """Connection state machine."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    CLOSED = "closed"


@runtime_checkable
class Channel(Protocol):
    """Protocol for duplex text channels.

    All channels must implement:
    - connect/close: Lifecycle management
    - send: Write one text message
    - messages: Iterate over inbound text messages until the channel closes
    """

    @property
    def state(self) -> ChannelState:
        """Current connection state."""
        ...

    @property
    def is_connected(self) -> bool:
        """Check if the channel is connected."""
        ...

    async def connect(self) -> None:
        """Establish the connection.

        Raises:
            ConnectionError: If connection fails
        """
        ...

    async def close(self) -> None:
        """Close the connection gracefully."""
        ...

    async def send(self, text: str) -> None:
        """Send one text message.

        Raises:
            ConnectionError: If not connected
        """
        ...

    def messages(self) -> AsyncIterator[str]:
        """Yield inbound text messages in arrival order.

        The iterator ends when the channel is closed by either side.
        """
        ...
