"""N-in-a-row detection around a single cell."""

from typing import List, Tuple

from ..board.board import Board

DIRECTIONS: List[Tuple[int, int]] = [
    (0, 1),   # horizontal
    (1, 0),   # vertical
    (1, 1),   # diagonal
    (1, -1),  # anti-diagonal
]


class WinDetector:
    """Checks whether a mark at (row, col) completes a winning line.

    Each direction is scanned at most ``win_length - 1`` cells forward and
    backward, so a check costs O(win_length) regardless of board size.
    Holds no state, so one detector can serve several threads.
    """

    def check_win(self, board: Board, row: int, col: int, mark: int) -> bool:
        """Return True if ``mark`` at (row, col) makes ``board.win_length`` in a row.

        The cell must already hold ``mark``; this does not place it.
        """
        grid = board.grid
        size = board.size
        win_length = board.win_length

        for dr, dc in DIRECTIONS:
            count = 1

            # Forward
            for step in range(1, win_length):
                r, c = row + dr * step, col + dc * step
                if not (0 <= r < size and 0 <= c < size) or grid[r, c] != mark:
                    break
                count += 1

            # Backward
            for step in range(1, win_length):
                r, c = row - dr * step, col - dc * step
                if not (0 <= r < size and 0 <= c < size) or grid[r, c] != mark:
                    break
                count += 1

            if count >= win_length:
                return True

        return False
