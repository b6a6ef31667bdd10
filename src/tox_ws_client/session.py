"""Interactive session.

Wires user input to the client:
- Lines starting with `/` are commands (see commands.commander)
- Any other line is a chat message to the active friend, if one is set
- Every notification and every response is shown on the display sink
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from .client import ChannelClosedError, ToxClient
from .commands import Action, AddAction, ChatAction, Commander, HelpAction, InfoAction
from .protocol import (
    InfoRequest,
    MessageKind,
    Notification,
    Request,
    Response,
    SendFriendMessageRequest,
    add_friend_request,
)

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "/"

HELP_LINES = [
    "Available commands:",
    "/help : shows this help message",
    "/info : get your name and Tox ID",
    "/add toxId [message] : add a friend. If no message, the friend will be added without a friend request",
    "/chat num : start chat with the friend with the id `num`",
]

Display = Callable[[str], None]


class SessionController:
    """Holds the active conversation target and drives the client.

    Responses are forwarded from done-callbacks, so handling a line never
    waits on the daemon.
    """

    def __init__(
        self,
        client: ToxClient,
        display: Display,
        commander: Commander | None = None,
    ) -> None:
        self._client = client
        self._display = display
        self._commander = commander or Commander()
        self.active_friend: int | None = None

        self._unsubscribe = client.on_notification(self._on_notification)

    async def handle_user_line(self, text: str) -> None:
        """Handle one submitted line of user input."""
        if text.startswith(COMMAND_PREFIX):
            await self.run_command(text[len(COMMAND_PREFIX) :])
            return

        if self.active_friend is None:
            logger.debug("No active friend, discarding input line")
            return

        self._display("> " + text)
        await self._request(
            SendFriendMessageRequest(
                friend=self.active_friend,
                kind=MessageKind.NORMAL,
                message=text,
            ),
            prefix="< ",
        )

    async def run_command(self, line: str) -> None:
        """Evaluate a command line (without the prefix) and act on it."""
        action = self._commander.evaluate(line)
        if action is None:
            logger.debug(f"Ignoring invalid command: {line!r}")
            return

        await self._dispatch(action)

    async def _dispatch(self, action: Action) -> None:
        if isinstance(action, HelpAction):
            for line in HELP_LINES:
                self._display(line)

        elif isinstance(action, InfoAction):
            # The daemon's Info request only covers ourselves
            await self._request(InfoRequest())

        elif isinstance(action, AddAction):
            await self._request(add_friend_request(action.tox_id, action.message))

        elif isinstance(action, ChatAction):
            self._display(f"Chat with: {action.friend}")
            self.active_friend = action.friend

    async def _request(self, request: Request, prefix: str = "") -> None:
        future = await self._client.send_request(request)

        def forward(done: asyncio.Future[Response]) -> None:
            if done.cancelled():
                return
            error = done.exception()
            if error is not None:
                if not isinstance(error, ChannelClosedError):
                    logger.error(f"{request.request} failed: {error}")
                else:
                    logger.debug(f"{request.request} abandoned: {error}")
                return
            self._display(prefix + done.result().to_json())

        future.add_done_callback(forward)

    def _on_notification(self, notification: Notification) -> None:
        self._display(notification.to_json())

    def detach(self) -> None:
        """Stop forwarding notifications."""
        self._unsubscribe()
