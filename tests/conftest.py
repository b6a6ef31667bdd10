"""Pytest configuration and shared fixtures."""

import pytest

from tox_ws_client.transport import MockChannel


@pytest.fixture
async def channel() -> MockChannel:
    """A connected in-memory channel."""
    mock = MockChannel()
    await mock.connect()
    return mock
