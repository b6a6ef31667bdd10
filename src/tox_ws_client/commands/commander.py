"""Command parser.

Maps a command line (without the leading `/`) to one of a closed set of
actions. Parsing is pure: every line maps to exactly one Action or to
None, and nothing is kept between calls.

Vocabulary:
    help
    info [friendId]
    add <toxId> [message...]
    chat <friendId>
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .input import DELIMITER, Input

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class HelpAction:
    """Show the usage text."""


@dataclass(frozen=True)
class InfoAction:
    """Query daemon info. `friend` is None for ourselves."""

    friend: int | None = None


@dataclass(frozen=True)
class AddAction:
    """Add a friend, with a friend request message if one is given."""

    tox_id: str
    message: str | None = None


@dataclass(frozen=True)
class ChatAction:
    """Route plain text input to a friend."""

    friend: int


Action = HelpAction | InfoAction | AddAction | ChatAction


def parse_int(token: str) -> int | None:
    """Parse a decimal integer token, or return None."""
    if not _INTEGER.fullmatch(token):
        return None
    return int(token)


class Commander:
    """Evaluates command lines into actions.

    Each command method follows the pattern:
    - Takes the Input positioned after the command name
    - Returns an Action, or None if the arguments are malformed
    """

    def evaluate(self, line: str) -> Action | None:
        """Parse a command line. Command names are case-sensitive."""
        command, _, rest = line.partition(DELIMITER)
        handler = getattr(self, f"_eval_{command}", None)
        if handler is None:
            return None
        return handler(Input(rest))

    def _eval_help(self, args: Input) -> Action | None:
        if not args.is_over():
            return None
        return HelpAction()

    def _eval_info(self, args: Input) -> Action | None:
        target = args.read_word()
        if target is None:
            return InfoAction(friend=None)

        friend = parse_int(target)
        if friend is None:
            return None
        return InfoAction(friend=friend)

    def _eval_add(self, args: Input) -> Action | None:
        tox_id = args.read_word()
        if tox_id is None:
            return None
        return AddAction(tox_id=tox_id, message=args.read_line())

    def _eval_chat(self, args: Input) -> Action | None:
        arg = args.read_word()
        if arg is None:
            return None

        friend = parse_int(arg)
        if friend is None:
            return None
        return ChatAction(friend=friend)
