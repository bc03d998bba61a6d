"""Shallow move-selection heuristic centered on the middle of the board."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from ..board.board import Board
from ..board.marks import is_player, opponent
from .win_detector import WinDetector


class SelectionRule(Enum):
    """Which heuristic rule produced a move."""

    OPENING = "opening"
    WIN = "win"
    BLOCK = "block"
    SPIRAL = "spiral"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class MoveDecision:
    """A chosen cell and the rule that chose it."""

    row: int
    col: int
    rule: SelectionRule

    @property
    def coords(self) -> Tuple[int, int]:
        return self.row, self.col


@dataclass(frozen=True)
class CenterWindow:
    """Square region around the center, clipped to the board."""

    start: int
    end: int  # inclusive

    @classmethod
    def for_board(cls, board: Board) -> 'CenterWindow':
        center = board.center
        radius = board.win_length
        return cls(start=max(0, center - radius), end=min(board.size - 1, center + radius))

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Row-major iteration over the window."""
        for row in range(self.start, self.end + 1):
            for col in range(self.start, self.end + 1):
                yield row, col


class MoveSelector:
    """Picks a move with a fixed priority of local rules.

    1. Take the center if it is free.
    2. Win immediately inside the center window.
    3. Block an immediate opponent win inside the same window.
    4. Spiral outwards from the center to the first empty cell.
    5. Fall back to the top-left cell.

    Rules 2 and 3 place a mark speculatively with :meth:`Board.try_move`,
    which leaves the board unchanged when the call returns.
    """

    def __init__(self, win_detector: Optional[WinDetector] = None):
        self.win_detector = win_detector if win_detector is not None else WinDetector()

    def select(self, board: Board, player: int) -> MoveDecision:
        """Choose a move for ``player`` on ``board``."""
        if not is_player(player):
            raise ValueError(f"Unknown player mark: {player}")

        center = board.center
        if board.is_empty(center, center):
            return MoveDecision(center, center, SelectionRule.OPENING)

        window = CenterWindow.for_board(board)

        move = self._find_winning_cell(board, window, player)
        if move is not None:
            return MoveDecision(move[0], move[1], SelectionRule.WIN)

        move = self._find_winning_cell(board, window, opponent(player))
        if move is not None:
            return MoveDecision(move[0], move[1], SelectionRule.BLOCK)

        move = self._spiral_search(board)
        if move is not None:
            return MoveDecision(move[0], move[1], SelectionRule.SPIRAL)

        return MoveDecision(0, 0, SelectionRule.FALLBACK)

    def _find_winning_cell(
        self, board: Board, window: CenterWindow, mark: int
    ) -> Optional[Tuple[int, int]]:
        """First empty cell in the window where ``mark`` would win."""
        for row, col in window.cells():
            if not board.is_empty(row, col):
                continue
            with board.try_move(row, col, mark):
                if self.win_detector.check_win(board, row, col, mark):
                    return row, col
        return None

    @staticmethod
    def _spiral_search(board: Board) -> Optional[Tuple[int, int]]:
        """First empty cell scanning squares of growing radius around the center.

        Every square is scanned in full, so inner cells are revisited for
        each radius. The resulting order decides between equal candidates.
        """
        center = board.center
        for radius in range(1, center + 1):
            for i in range(-radius, radius + 1):
                for j in range(-radius, radius + 1):
                    row, col = center + i, center + j
                    if board.in_bounds(row, col) and board.is_empty(row, col):
                        return row, col
        return None
