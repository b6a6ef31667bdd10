"""Unit tests for the command-line entry point."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from tox_ws_client.cli import main, run_session
from tox_ws_client.config import ClientConfig
from tox_ws_client.transport import MockChannel


class TestMainOptions:
    """Tests for option handling in main()."""

    def test_help(self) -> None:
        result = CliRunner().invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "--url" in result.output
        assert "--no-ping" in result.output

    def test_options_override_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOX_WS_URL", "ws://from-env:1")
        captured: list[ClientConfig] = []

        async def fake_run(config: ClientConfig) -> None:
            captured.append(config)

        with patch("tox_ws_client.cli.run_session", new=fake_run):
            result = CliRunner().invoke(
                main, ["--url", "ws://flag:2", "--log-level", "debug", "--no-ping"]
            )

        assert result.exit_code == 0
        assert captured[0].url == "ws://flag:2"
        assert captured[0].log_level == "DEBUG"
        assert captured[0].ping_interval is None

    def test_environment_url_used_without_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOX_WS_URL", "ws://from-env:1")
        captured: list[ClientConfig] = []

        async def fake_run(config: ClientConfig) -> None:
            captured.append(config)

        with patch("tox_ws_client.cli.run_session", new=fake_run):
            CliRunner().invoke(main, [])

        assert captured[0].url == "ws://from-env:1"

    def test_connection_error_reported(self) -> None:
        async def fake_run(config: ClientConfig) -> None:
            raise ConnectionError("Failed to connect to ws://127.0.0.1:2794: refused")

        with patch("tox_ws_client.cli.run_session", new=fake_run):
            result = CliRunner().invoke(main, [])

        assert result.exit_code == 1
        assert "Failed to connect" in result.output


class TestRunSession:
    """Tests for the stdin-driven session loop."""

    @pytest.mark.asyncio
    async def test_lines_drive_session(self, capsys: pytest.CaptureFixture[str]) -> None:
        channel = MockChannel()
        lines = AsyncMock(side_effect=["/chat 4\n", "\n", "hello\r\n", None])

        with (
            patch("tox_ws_client.cli.WebSocketChannel", return_value=channel),
            patch("tox_ws_client.cli._read_line", new=lines),
        ):
            await run_session(ClientConfig())

        assert [json.loads(s) for s in channel.sent] == [
            {"request": "SendFriendMessage", "friend": 4, "kind": "Normal", "message": ""},
            {"request": "SendFriendMessage", "friend": 4, "kind": "Normal", "message": "hello"},
        ]
        output = capsys.readouterr().out
        assert "Chat with: 4" in output
        assert "> hello" in output
