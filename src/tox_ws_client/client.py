"""Tox daemon client.

Owns the duplex channel and turns it into:
- Request/response calls returning futures
- A notification feed delivered to registered handlers

Correlation is positional. The daemon answers requests in the order they
were sent, so every outgoing request appends a future to a FIFO queue and
every inbound response completes the oldest one. Appending and writing
happen under one lock so the queue order always matches the wire order.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections import deque
from collections.abc import Callable
from typing import Any

from .protocol import (
    InfoRequest,
    MessageKind,
    MessageParseError,
    Notification,
    Request,
    Response,
    SendFriendMessageRequest,
    add_friend_request,
    parse_message,
)
from .transport import Channel

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[Notification], None]


class ChannelClosedError(ConnectionError):
    """Raised for requests that can no longer be answered."""


class ToxClient:
    """Client for a single daemon connection.

    Usage:
        async with ToxClient(WebSocketChannel(config)) as client:
            client.on_notification(print)
            response = await client.info()
    """

    def __init__(self, channel: Channel):
        self._channel = channel
        self._pending: deque[asyncio.Future[Response]] = deque()
        self._handlers: list[NotificationHandler] = []
        self._send_lock = asyncio.Lock()
        self._reader_task: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def channel(self) -> Channel:
        return self._channel

    @property
    def pending_count(self) -> int:
        """Number of requests still waiting for a response."""
        return len(self._pending)

    @property
    def is_closed(self) -> bool:
        return self._closed

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def connect(self) -> None:
        """Connect the channel and start reading from it."""
        await self._channel.connect()
        self.start()

    def start(self) -> None:
        """Start the background reader on an already connected channel."""
        if self._reader_task is None:
            self._reader_task = asyncio.create_task(self._read_loop())

    async def close(self) -> None:
        """Stop reading, close the channel and fail all pending requests."""
        self._closed = True

        if self._reader_task:
            self._reader_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._reader_task
            self._reader_task = None

        await self._channel.close()
        self._fail_pending("Client closed")

    async def _read_loop(self) -> None:
        """Background task feeding every inbound message to handle_message."""
        try:
            async for raw in self._channel.messages():
                try:
                    self.handle_message(raw)
                except Exception:
                    logger.exception("Error handling inbound message")
        except Exception as e:
            logger.error(f"Read loop error: {e}")
        finally:
            self._closed = True
            self._fail_pending("Channel closed")

    def _fail_pending(self, reason: str) -> None:
        if self._pending:
            logger.info(f"{reason}: failing {len(self._pending)} pending request(s)")
        while self._pending:
            future = self._pending.popleft()
            if not future.done():
                future.set_exception(ChannelClosedError(reason))

    # -------------------------------------------------------------------------
    # Inbound
    # -------------------------------------------------------------------------

    def handle_message(self, raw: str) -> None:
        """Route one inbound payload.

        Responses complete the oldest pending request. Notifications go to
        every handler in registration order. Anything else is dropped.
        """
        try:
            message = parse_message(raw)
        except MessageParseError as e:
            logger.warning(f"Dropping unparseable message: {e}")
            return

        if isinstance(message, Response):
            self._push_response(message)
        else:
            self._dispatch_notification(message)

    def _push_response(self, response: Response) -> None:
        if not self._pending:
            logger.debug(f"Dropping response with no pending request: {response.to_json()}")
            return

        future = self._pending.popleft()
        if not future.done():
            future.set_result(response)

    def _dispatch_notification(self, notification: Notification) -> None:
        # Snapshot so handlers may subscribe or unsubscribe during dispatch
        for handler in list(self._handlers):
            try:
                handler(notification)
            except Exception:
                logger.exception(f"Error in notification handler for {notification.event!r}")

    def on_notification(self, handler: NotificationHandler) -> Callable[[], None]:
        """Register a handler for every future notification.

        Returns:
            Unsubscribe function
        """
        self._handlers.append(handler)

        def unsubscribe() -> None:
            self.remove_notification_handler(handler)

        return unsubscribe

    def remove_notification_handler(self, handler: NotificationHandler) -> None:
        """Stop delivering notifications to a handler."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    # -------------------------------------------------------------------------
    # Outbound
    # -------------------------------------------------------------------------

    async def send_request(self, request: Request) -> asyncio.Future[Response]:
        """Write a request and return the future for its response.

        The future is enqueued and the request written under the send lock,
        so concurrent callers can never reorder the queue against the wire.

        Raises:
            ChannelClosedError: If the client is closed
            ConnectionError: If the channel write fails
        """
        if self._closed:
            raise ChannelClosedError("Client closed")

        future: asyncio.Future[Response] = asyncio.get_running_loop().create_future()

        async with self._send_lock:
            self._pending.append(future)
            try:
                await self._channel.send(request.to_json())
            except asyncio.CancelledError:
                # The frame may already be on the wire: keep the slot so its
                # response is consumed, but nobody waits on it
                future.cancel()
                raise
            except Exception:
                # Still the tail unless a close already drained the queue
                if self._pending and self._pending[-1] is future:
                    self._pending.pop()
                raise

        logger.debug(f"Sent {request.request} ({len(self._pending)} pending)")
        return future

    async def call(self, request: Request) -> Response:
        """Send a request and wait for its response."""
        future = await self.send_request(request)
        return await future

    async def info(self) -> Response:
        """Get our own name and Tox ID."""
        return await self.call(InfoRequest())

    async def add_friend(self, tox_id: str, message: str | None = None) -> Response:
        """Add a friend, sending a friend request only if a message is given."""
        return await self.call(add_friend_request(tox_id, message))

    async def send_friend_message(
        self,
        friend: int,
        message: str,
        kind: MessageKind = MessageKind.NORMAL,
    ) -> Response:
        """Send a chat message to a friend."""
        return await self.call(
            SendFriendMessageRequest(friend=friend, kind=kind, message=message)
        )

    async def __aenter__(self) -> ToxClient:
        await self.connect()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
