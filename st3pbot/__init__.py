"""Line-protocol bot for N-in-a-row games on square boards."""

__version__ = "0.1.0"

from .board import Board, PositionCodec
from .config import EngineConfig
from .engine import MoveEngine
from .errors import InvalidBoardState, InvalidCommand, InvalidPosition, St3pError

__all__ = [
    "__version__",
    "Board",
    "PositionCodec",
    "EngineConfig",
    "MoveEngine",
    "St3pError",
    "InvalidPosition",
    "InvalidBoardState",
    "InvalidCommand",
]
