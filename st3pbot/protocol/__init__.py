"""st3p line protocol: command parsing and the read loop."""

from .commands import CommandType, classify, parse_move, parse_version
from .handler import ProtocolHandler
from .models import Identity, MoveCommand, VersionCommand

__all__ = [
    "CommandType",
    "classify",
    "parse_move",
    "parse_version",
    "ProtocolHandler",
    "Identity",
    "MoveCommand",
    "VersionCommand",
]
