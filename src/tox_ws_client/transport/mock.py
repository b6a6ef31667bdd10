"""In-memory channel for testing.

Records everything sent and replays whatever is fed to it. No actual I/O.

Usage:
    channel = MockChannel()
    client = ToxClient(channel)
    async with client:
        future = await client.send_request(InfoRequest())
        channel.feed('{"response": "Info", "name": "alice"}')
        response = await future

    assert channel.sent == ['{"request":"Info"}']
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from .base import ChannelState


class MockChannel:
    """Channel backed by an asyncio.Queue."""

    def __init__(self, fail_on_send: bool = False) -> None:
        self._state = ChannelState.DISCONNECTED
        self._inbound: asyncio.Queue[str | None] = asyncio.Queue()
        self._sent: list[str] = []
        self.fail_on_send = fail_on_send

    @property
    def state(self) -> ChannelState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state == ChannelState.CONNECTED

    @property
    def sent(self) -> list[str]:
        """Get all messages sent through this channel."""
        return self._sent.copy()

    def feed(self, text: str) -> None:
        """Queue an inbound message as if the daemon had sent it."""
        self._inbound.put_nowait(text)

    def hang_up(self) -> None:
        """End the inbound stream as if the daemon had closed the connection."""
        self._inbound.put_nowait(None)

    async def connect(self) -> None:
        self._state = ChannelState.CONNECTED

    async def close(self) -> None:
        if self._state == ChannelState.CONNECTED:
            self._state = ChannelState.CLOSED
            self._inbound.put_nowait(None)

    async def send(self, text: str) -> None:
        if not self.is_connected:
            raise ConnectionError("Channel not connected")
        if self.fail_on_send:
            raise ConnectionError("Simulated send failure")
        self._sent.append(text)

    async def messages(self) -> AsyncIterator[str]:
        while True:
            text = await self._inbound.get()
            if text is None:
                break
            yield text
