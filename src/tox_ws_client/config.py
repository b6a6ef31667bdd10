"""Client configuration.

Defaults can be overridden with environment variables:
- TOX_WS_URL: daemon WebSocket URL
- TOX_WS_PING_INTERVAL: keep-alive ping interval in seconds (0 disables pings)
- TOX_WS_LOG_LEVEL: logging level name for the CLI
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_URL = "ws://127.0.0.1:2794"


@dataclass
class ClientConfig:
    """Configuration for the daemon connection."""

    url: str = DEFAULT_URL
    open_timeout: float = 10.0

    # Keep-alive (None disables)
    ping_interval: float | None = 20.0
    ping_timeout: float | None = 20.0

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build a config from defaults and TOX_WS_* environment variables."""
        config = cls()

        if url := os.getenv("TOX_WS_URL"):
            config.url = url

        if level := os.getenv("TOX_WS_LOG_LEVEL"):
            config.log_level = level.upper()

        if interval := os.getenv("TOX_WS_PING_INTERVAL"):
            try:
                seconds = float(interval)
            except ValueError:
                logger.warning(f"Ignoring invalid TOX_WS_PING_INTERVAL: {interval!r}")
            else:
                config.ping_interval = seconds if seconds > 0 else None

        return config
