"""Tokenizing and parsing of protocol lines."""

from enum import Enum
from typing import List, Optional

from pydantic import ValidationError

from ..board.board import DEFAULT_WIN_LENGTH
from ..errors import InvalidCommand
from .models import MoveCommand, VersionCommand

TIME_OPTION = "time"
TIME_PREFIX = "ms:"
WIN_LENGTH_OPTION = "win-length"


class CommandType(Enum):
    """Kinds of protocol lines the bot reacts to."""

    VERSION = "version"
    IDENTIFY = "identify"
    MOVE = "move"
    QUIT = "quit"


def classify(line: str) -> Optional[CommandType]:
    """Return the command type of a stripped line, or None to ignore it."""
    if line.startswith("st3p version"):
        return CommandType.VERSION
    if line == "identify":
        return CommandType.IDENTIFY
    if line == "quit":
        return CommandType.QUIT
    tokens = line.split()
    if tokens and tokens[0] == "move":
        return CommandType.MOVE
    return None


def parse_version(line: str) -> Optional[VersionCommand]:
    """Parse `st3p version <id>`; None when the id is missing."""
    tokens = line.split()
    if len(tokens) < 3:
        return None
    return VersionCommand(protocol_id=tokens[2])


def _parse_options(tokens: List[str], default_win_length: int) -> dict:
    """Read `time ms:<N>` and `win-length <N>` options.

    Unparsable values are skipped and the previous value kept.
    """
    time_limit_ms = 0
    win_length = default_win_length

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == TIME_OPTION:
            if i + 1 < len(tokens) and tokens[i + 1].startswith(TIME_PREFIX):
                try:
                    time_limit_ms = int(tokens[i + 1][len(TIME_PREFIX):])
                    i += 1
                except ValueError:
                    pass
        elif token == WIN_LENGTH_OPTION:
            if i + 1 < len(tokens):
                try:
                    value = int(tokens[i + 1])
                    if value > 0:
                        win_length = value
                except ValueError:
                    pass
                i += 1
        i += 1

    return {"time_limit_ms": time_limit_ms, "win_length": win_length}


def parse_move(line: str, default_win_length: int = DEFAULT_WIN_LENGTH) -> MoveCommand:
    """Parse a `move` line.

    Args:
        line: Full protocol line starting with `move`
        default_win_length: Win length used when no `win-length` option is given

    Returns:
        Validated MoveCommand

    Raises:
        InvalidCommand: If fields are missing or the player is not X/O
    """
    tokens = line.split()
    if len(tokens) < 3:
        raise InvalidCommand(f"Invalid move command format: {line!r}")

    options = _parse_options(tokens[3:], default_win_length)
    try:
        return MoveCommand(
            board_state=tokens[1],
            player=tokens[2][0].upper(),
            **options,
        )
    except ValidationError as e:
        raise InvalidCommand(f"Invalid move command {line!r}: {e}") from e
