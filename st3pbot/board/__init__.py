"""Board model and position notation."""

from .board import Board, DEFAULT_MAX_BOARD_SIZE, DEFAULT_WIN_LENGTH
from .marks import EMPTY, PLAYER_O, PLAYER_X, opponent
from .position_codec import PositionCodec, decode_column, encode_column

__all__ = [
    "Board",
    "DEFAULT_MAX_BOARD_SIZE",
    "DEFAULT_WIN_LENGTH",
    "EMPTY",
    "PLAYER_X",
    "PLAYER_O",
    "opponent",
    "PositionCodec",
    "encode_column",
    "decode_column",
]
