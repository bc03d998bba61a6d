"""Square game board and the run-length board-state notation."""

import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np

from ..errors import InvalidBoardState
from .marks import CHAR_TO_MARK, EMPTY, EMPTY_CHAR, MARK_TO_CHAR
from .position_codec import MAX_COLUMNS, encode_column

DEFAULT_WIN_LENGTH = 3
DEFAULT_MAX_BOARD_SIZE = 100


@dataclass(eq=False)
class Board:
    """Grid of cell states (EMPTY, PLAYER_X, PLAYER_O) plus the win length."""

    grid: np.ndarray  # size x size, int8
    win_length: int = DEFAULT_WIN_LENGTH

    def __post_init__(self):
        if self.grid.ndim != 2 or self.grid.shape[0] != self.grid.shape[1]:
            raise ValueError(f"Board grid must be square, got shape {self.grid.shape}")
        if self.grid.shape[0] == 0:
            raise ValueError("Board must have at least one cell")
        if self.win_length <= 0:
            raise ValueError("win_length must be a positive integer")

    @classmethod
    def empty(cls, size: int, win_length: int = DEFAULT_WIN_LENGTH) -> 'Board':
        return cls(np.zeros((size, size), dtype=np.int8), win_length)

    @classmethod
    def from_state_string(
        cls,
        state: str,
        size: Optional[int] = None,
        win_length: int = DEFAULT_WIN_LENGTH,
        max_size: int = DEFAULT_MAX_BOARD_SIZE,
    ) -> 'Board':
        """Build a board from notation such as ``"X_O/3/__X"``.

        Rows are separated by ``/``. Inside a row ``_`` is one empty cell,
        a group of digits is a run of that many empty cells and ``X``/``O``
        are player marks. When ``size`` is omitted it is the number of rows,
        except that a single row of k*k cells (k > 1) is read row-major as a
        k x k board, e.g. ``"_________"`` for an empty 3x3 board.

        Raises:
            InvalidBoardState: On unknown characters, overflowing runs or
                rows whose decoded length differs from the board size
        """
        if not state:
            raise InvalidBoardState("Empty board state")

        limit = min(max_size, MAX_COLUMNS)
        rows = state.split('/')

        if size is None and len(rows) == 1:
            cells = _decode_row(state, 0, limit * limit)
            side = math.isqrt(len(cells))
            if side > 1 and side * side == len(cells):
                grid = np.array(cells, dtype=np.int8).reshape(side, side)
                return cls(grid, win_length)

        if size is None:
            size = len(rows)
        if len(rows) != size:
            raise InvalidBoardState(
                f"Board state has {len(rows)} rows, expected {size}"
            )
        if size > limit:
            raise InvalidBoardState(
                f"Board size {size} exceeds maximum of {limit}"
            )

        board = cls.empty(size, win_length)
        for row_idx, row in enumerate(rows):
            cells = _decode_row(row, row_idx, size)
            if len(cells) != size:
                raise InvalidBoardState(
                    f"Invalid row length in row {row_idx + 1}, "
                    f"got {len(cells)} expected {size}"
                )
            board.grid[row_idx, :] = cells
        return board

    @property
    def size(self) -> int:
        return self.grid.shape[0]

    @property
    def center(self) -> int:
        return self.size // 2

    def copy(self) -> 'Board':
        return Board(grid=self.grid.copy(), win_length=self.win_length)

    def get(self, row: int, col: int) -> int:
        return int(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == EMPTY

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def empty_count(self) -> int:
        return int(np.sum(self.grid == EMPTY))

    def is_full(self) -> bool:
        return self.empty_count() == 0

    def place(self, row: int, col: int, mark: int) -> None:
        """Put a mark on a cell. Bounds are the caller's responsibility."""
        self.grid[row, col] = mark

    def clear(self, row: int, col: int) -> None:
        self.grid[row, col] = EMPTY

    @contextmanager
    def try_move(self, row: int, col: int, mark: int) -> Iterator['Board']:
        """Place a mark for the duration of the block, then clear it.

        The cell is restored on every exit path, including early returns
        and exceptions raised inside the block.
        """
        self.place(row, col, mark)
        try:
            yield self
        finally:
            self.clear(row, col)

    def to_state_string(self, compress: bool = True) -> str:
        """Serialize back to board-state notation.

        Args:
            compress: Write empty runs as decimal counts instead of
                repeated underscores

        Returns:
            Notation string accepted by :meth:`from_state_string`
        """
        rows = []
        for row in self.grid:
            parts: List[str] = []
            run = 0
            for cell in row:
                if cell == EMPTY:
                    run += 1
                    continue
                if run:
                    parts.append(str(run) if compress else EMPTY_CHAR * run)
                    run = 0
                parts.append(MARK_TO_CHAR[int(cell)])
            if run:
                parts.append(str(run) if compress else EMPTY_CHAR * run)
            rows.append(''.join(parts))
        return '/'.join(rows)

    def to_display_string(self) -> str:
        """Readable grid with column letters and 1-based row numbers."""
        lines = []
        header = "  "
        for col in range(self.size):
            code = encode_column(col)
            header += code + (" " if len(code) == 2 else "  ")
        lines.append(header)

        for row in range(self.size):
            cells = "".join(
                f" {MARK_TO_CHAR[int(cell)]} " for cell in self.grid[row]
            )
            lines.append(f"{row + 1:2d}{cells}")

        return "\n".join(lines) + "\n"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.win_length == other.win_length
            and np.array_equal(self.grid, other.grid)
        )


def _decode_row(row: str, row_idx: int, width: int) -> List[int]:
    """Decode one row of notation into cell marks.

    Digit groups are read greedily as a single count; a row longer than
    ``width`` cells is rejected.
    """
    cells: List[int] = []
    pos = 0
    while pos < len(row):
        ch = row[pos]
        if '0' <= ch <= '9':
            end = pos
            while end < len(row) and '0' <= row[end] <= '9':
                end += 1
            count = int(row[pos:end])
            if len(cells) + count > width:
                raise InvalidBoardState(
                    f"Empty run of {count} overflows row {row_idx + 1} (size {width})"
                )
            cells.extend([EMPTY] * count)
            pos = end
            continue

        if ch == EMPTY_CHAR:
            cells.append(EMPTY)
        elif ch in CHAR_TO_MARK:
            if len(cells) >= width:
                raise InvalidBoardState(
                    f"Invalid row length in row {row_idx + 1}, mark beyond column {width}"
                )
            cells.append(CHAR_TO_MARK[ch])
        else:
            raise InvalidBoardState(
                f"Invalid character {ch!r} in board state row {row_idx + 1}"
            )
        pos += 1
    return cells
