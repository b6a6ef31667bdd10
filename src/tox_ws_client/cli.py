"""Tox WebSocket client CLI.

Connects to a Tox daemon and runs an interactive chat session on the
terminal. Lines typed on stdin are handled as commands or chat messages;
everything the daemon sends is printed to stdout. Logs go to stderr.

Usage:
    tox-ws-client                                 # Connect to ws://127.0.0.1:2794
    tox-ws-client --url ws://10.0.0.2:2794        # Custom daemon URL
    tox-ws-client --log-level DEBUG               # Verbose logging
    tox-ws-client --no-ping                       # Disable keep-alive pings
"""

from __future__ import annotations

import asyncio
import logging
import sys

import click

from .client import ToxClient
from .config import ClientConfig
from .session import SessionController
from .transport import WebSocketChannel

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: str) -> None:
    """Send all logging to stderr so stdout only carries the chat."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def display(text: str) -> None:
    """Display sink for the session."""
    click.echo(text)


async def _read_line() -> str | None:
    """Read a line from stdin without blocking the event loop."""
    loop = asyncio.get_running_loop()
    line = await loop.run_in_executor(None, sys.stdin.readline)
    return line if line else None


async def run_session(config: ClientConfig) -> None:
    """Connect and feed stdin to a session until EOF or disconnect."""
    client = ToxClient(WebSocketChannel(config))

    async with client:
        session = SessionController(client, display)
        display("Connected. Type /help for available commands.")

        while not client.is_closed:
            line = await _read_line()
            if line is None:
                break

            # Empty lines are chat messages too
            line = line.rstrip("\r\n")

            try:
                await session.handle_user_line(line)
            except ConnectionError as e:
                logger.error(f"Connection lost: {e}")
                break

        session.detach()


@click.command()
@click.option(
    "--url",
    default=None,
    help="Daemon WebSocket URL (default: ws://127.0.0.1:2794, or TOX_WS_URL)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: WARNING, or TOX_WS_LOG_LEVEL)",
)
@click.option("--no-ping", is_flag=True, help="Disable WebSocket keep-alive pings")
def main(url: str | None, log_level: str | None, no_ping: bool) -> None:
    """Interactive client for a Tox daemon over WebSocket."""
    config = ClientConfig.from_env()
    if url:
        config.url = url
    if log_level:
        config.log_level = log_level.upper()
    if no_ping:
        config.ping_interval = None

    configure_logging(config.log_level)

    try:
        asyncio.run(run_session(config))
    except ConnectionError as e:
        raise click.ClickException(str(e)) from e
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
