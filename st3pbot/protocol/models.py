"""Data models for parsed protocol commands."""

from typing import List, Literal

from pydantic import BaseModel, Field

from ..board.board import DEFAULT_WIN_LENGTH
from ..board.marks import CHAR_TO_MARK


class VersionCommand(BaseModel):
    """`st3p version <id>` handshake."""
    protocol_id: str = Field(..., min_length=1)

    def response(self) -> str:
        return f"st3p version {self.protocol_id} ok"


class MoveCommand(BaseModel):
    """`move <boardState> <player> [time ms:<N>] [win-length <N>]` request."""
    board_state: str = Field(..., min_length=1)
    player: Literal["X", "O"]
    time_limit_ms: int = 0  # <= 0 means no deadline
    win_length: int = Field(DEFAULT_WIN_LENGTH, gt=0)

    @property
    def player_mark(self) -> int:
        return CHAR_TO_MARK[self.player]

    @property
    def has_deadline(self) -> bool:
        return self.time_limit_ms > 0


class Identity(BaseModel):
    """Bot identity reported by `identify`."""
    name: str
    author: str
    version: str

    def response_lines(self) -> List[str]:
        return [
            f"identify name {self.name}",
            f"identify author {self.author}",
            f"identify version {self.version}",
            "identify ok",
        ]
