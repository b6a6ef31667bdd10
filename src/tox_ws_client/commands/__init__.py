"""Text command language for the interactive client."""

from .commander import (
    Action,
    AddAction,
    ChatAction,
    Commander,
    HelpAction,
    InfoAction,
    parse_int,
)
from .input import Input

__all__ = [
    "Action",
    "AddAction",
    "ChatAction",
    "Commander",
    "HelpAction",
    "InfoAction",
    "Input",
    "parse_int",
]
