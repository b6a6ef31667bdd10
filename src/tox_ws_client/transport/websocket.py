"""WebSocket channel implementation.

Connects to the Tox daemon's WebSocket endpoint. Each protocol message is
one text frame holding a JSON object.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed, ConnectionClosedError

from ..config import ClientConfig
from .base import ChannelState

logger = logging.getLogger(__name__)


class WebSocketChannel:
    """Channel over a single WebSocket connection.

    Wire format:
    - Outbound: one JSON request per text frame
    - Inbound: one JSON response or event per text frame
    - Binary frames are not part of the protocol and are dropped
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self._state = ChannelState.DISCONNECTED
        self._ws: ClientConnection | None = None

    @property
    def state(self) -> ChannelState:
        """Current connection state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        """Check if the WebSocket is connected."""
        return self._state == ChannelState.CONNECTED

    async def connect(self) -> None:
        """Open the WebSocket connection."""
        if self._state == ChannelState.CONNECTED:
            return

        self._state = ChannelState.CONNECTING
        try:
            self._ws = await connect(
                self.config.url,
                open_timeout=self.config.open_timeout,
                ping_interval=self.config.ping_interval,
                ping_timeout=self.config.ping_timeout,
            )
        except Exception as e:
            self._state = ChannelState.DISCONNECTED
            raise ConnectionError(f"Failed to connect to {self.config.url}: {e}") from e

        self._state = ChannelState.CONNECTED
        logger.info(f"WebSocket connected to {self.config.url}")

    async def close(self) -> None:
        """Close the WebSocket connection."""
        if self._state in (ChannelState.DISCONNECTED, ChannelState.CLOSED):
            return

        self._state = ChannelState.CLOSED
        if self._ws:
            await self._ws.close()
            self._ws = None
        logger.info("WebSocket closed")

    async def send(self, text: str) -> None:
        """Send a text frame."""
        if not self._ws or not self.is_connected:
            raise ConnectionError("WebSocket not connected")

        try:
            await self._ws.send(text)
        except ConnectionClosed as e:
            raise ConnectionError(f"WebSocket closed: {e}") from e

    async def messages(self) -> AsyncIterator[str]:
        """Yield inbound text frames until the connection closes."""
        if not self._ws:
            raise ConnectionError("WebSocket not connected")

        try:
            async for data in self._ws:
                if isinstance(data, bytes):
                    logger.debug(f"Dropping binary frame ({len(data)} bytes)")
                    continue
                yield data
        except ConnectionClosedError as e:
            logger.warning(f"WebSocket connection lost: {e}")
        except ConnectionClosed:
            pass
        finally:
            if self._state == ChannelState.CONNECTED:
                self._state = ChannelState.CLOSED
