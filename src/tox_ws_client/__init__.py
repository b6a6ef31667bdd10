"""Tox WebSocket client.

A client for a Tox daemon reachable over a single WebSocket connection:
- ToxClient correlates requests with responses and fans out notifications
- Commander parses the `/command` language
- SessionController ties user input, the client and a display sink together
"""

from .client import ChannelClosedError, ToxClient
from .commands import Commander, Input
from .config import ClientConfig
from .session import SessionController

__version__ = "0.1.0"

__all__ = [
    "ChannelClosedError",
    "ClientConfig",
    "Commander",
    "Input",
    "SessionController",
    "ToxClient",
]
