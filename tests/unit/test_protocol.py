"""Unit tests for the daemon wire protocol."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from tox_ws_client.protocol import (
    AddFriendNoRequest,
    AddFriendRequest,
    InfoRequest,
    MessageKind,
    MessageParseError,
    Notification,
    Response,
    SendFriendMessageRequest,
    add_friend_request,
    parse_message,
)

# =============================================================================
# Requests
# =============================================================================


class TestRequests:
    """Tests for request serialization."""

    def test_info(self) -> None:
        assert json.loads(InfoRequest().to_json()) == {"request": "Info"}

    def test_add_friend(self) -> None:
        data = json.loads(AddFriendRequest(tox_id="ABC", message="hi").to_json())

        assert data == {"request": "AddFriend", "tox_id": "ABC", "message": "hi"}

    def test_add_friend_no_request(self) -> None:
        """The wire name has a lowercase 'r'."""
        data = json.loads(AddFriendNoRequest(tox_id="ABC").to_json())

        assert data == {"request": "AddFriendNorequest", "tox_id": "ABC"}

    def test_send_friend_message(self) -> None:
        data = json.loads(SendFriendMessageRequest(friend=3, message="yo").to_json())

        assert data == {
            "request": "SendFriendMessage",
            "friend": 3,
            "kind": "Normal",
            "message": "yo",
        }

    def test_send_friend_action(self) -> None:
        request = SendFriendMessageRequest(friend=1, kind=MessageKind.ACTION, message="waves")

        assert json.loads(request.to_json())["kind"] == "Action"

    def test_requests_are_immutable(self) -> None:
        request = AddFriendNoRequest(tox_id="ABC")

        with pytest.raises(ValidationError):
            request.tox_id = "DEF"  # type: ignore[misc]

    def test_add_friend_request_with_message(self) -> None:
        request = add_friend_request("ABC", "hi")

        assert request == AddFriendRequest(tox_id="ABC", message="hi")

    def test_add_friend_request_without_message(self) -> None:
        assert add_friend_request("ABC") == AddFriendNoRequest(tox_id="ABC")

    def test_add_friend_request_with_empty_message(self) -> None:
        """An empty message is still a message."""
        assert isinstance(add_friend_request("ABC", ""), AddFriendRequest)


# =============================================================================
# Inbound messages
# =============================================================================


class TestParseMessage:
    """Tests for inbound routing decode."""

    def test_response(self) -> None:
        message = parse_message('{"response": "Info", "name": "alice", "tox_id": "ABC"}')

        assert isinstance(message, Response)
        assert message.response == "Info"
        assert message.model_dump()["name"] == "alice"

    def test_notification(self) -> None:
        message = parse_message('{"event": "FriendMessage", "friend": 0, "message": "hi"}')

        assert isinstance(message, Notification)
        assert message.event == "FriendMessage"

    def test_null_response_marker_is_still_a_response(self) -> None:
        """Presence of the field decides routing, not its value."""
        assert isinstance(parse_message('{"response": null}'), Response)

    def test_response_takes_precedence(self) -> None:
        message = parse_message('{"response": "Ok", "event": "Other"}')

        assert isinstance(message, Response)

    def test_to_json_round_trips_payload(self) -> None:
        raw = '{"event": "FriendStatus", "friend": 2, "status": "Online"}'
        message = parse_message(raw)

        assert json.loads(message.to_json()) == json.loads(raw)

    def test_to_json_is_compact(self) -> None:
        message = parse_message('{"response": "Ok"}')

        assert message.to_json() == '{"response":"Ok"}'

    def test_to_json_keeps_arrival_key_order(self) -> None:
        raw = '{"tox_id":"A","name":"bob","response":"Info"}'

        assert parse_message(raw).to_json() == raw

    def test_deeply_nested_payload_is_unparseable(self) -> None:
        raw = '{"x":' * 100000 + "1" + "}" * 100000

        with pytest.raises(MessageParseError):
            parse_message(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            "",
            "[1, 2]",
            "42",
            '"response"',
            "null",
            '{"status": "ok"}',
        ],
    )
    def test_unroutable_payloads(self, raw: str) -> None:
        with pytest.raises(MessageParseError):
            parse_message(raw)
