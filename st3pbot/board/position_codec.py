"""Mapping between board coordinates and position strings like "a1" or "aa15"."""

import threading
from typing import Dict, List, Tuple

from ..errors import InvalidPosition

# Two-letter column codes top out at "zz"
MAX_COLUMNS = 26 * 27

PositionTable = Tuple[Tuple[str, ...], ...]


def encode_column(code: int) -> str:
    """Encode a 0-based column index.

    Indices 0-25 map to 'a'..'z'. From 26 on, the first letter is
    ``'a' + (code // 26 - 1)`` and the second ``'a' + code % 26``, so 26 is
    "aa", 51 is "az" and 52 is "ba".
    """
    if code < 0 or code >= MAX_COLUMNS:
        raise InvalidPosition(f"Column index {code} cannot be encoded")
    if code < 26:
        return chr(ord('a') + code)
    return chr(ord('a') + code // 26 - 1) + chr(ord('a') + code % 26)


def decode_column(text: str) -> int:
    """Inverse of :func:`encode_column` for one- and two-letter codes."""
    code = text.lower()
    if not code or len(code) > 2 or not all('a' <= ch <= 'z' for ch in code):
        raise InvalidPosition(f"Invalid column code: {text!r}")
    if len(code) == 1:
        return ord(code) - ord('a')
    return (ord(code[0]) - ord('a') + 1) * 26 + (ord(code[1]) - ord('a'))


def _split_position(text: str) -> Tuple[str, str]:
    """Split "ab12" into ("ab", "12")."""
    idx = len(text)
    while idx > 0 and '0' <= text[idx - 1] <= '9':
        idx -= 1
    return text[:idx], text[idx:]


class PositionCodec:
    """Encodes and decodes positions with one lookup table per board size.

    Tables are built lazily the first time a size is requested and are
    never modified afterwards. Construction is guarded by a lock, so
    concurrent first use of a size builds its table only once.
    """

    def __init__(self):
        self._tables: Dict[int, PositionTable] = {}
        self._lock = threading.Lock()
        self.tables_built = 0

    def table(self, size: int) -> PositionTable:
        """Get the position table for a board size, building it if needed."""
        table = self._tables.get(size)
        if table is not None:
            return table

        with self._lock:
            table = self._tables.get(size)
            if table is None:
                table = self._build_table(size)
                self._tables[size] = table
                self.tables_built += 1
        return table

    def cached_sizes(self) -> List[int]:
        return sorted(self._tables)

    def encode(self, size: int, row: int, col: int) -> str:
        """Position string for a 0-based (row, col) on a board of ``size``."""
        if not (0 <= row < size and 0 <= col < size):
            raise InvalidPosition(
                f"Position ({row}, {col}) out of bounds for board size {size}"
            )
        return self.table(size)[row][col]

    def decode(self, text: str, size: int) -> Tuple[int, int]:
        """Parse a position string into a 0-based (row, col).

        Args:
            text: Position like "b2" or "AA15" (case-insensitive)
            size: Board size the position must fit in

        Returns:
            (row, col) tuple

        Raises:
            InvalidPosition: If the string is malformed or out of bounds
        """
        text = text.strip()
        if len(text) < 2:
            raise InvalidPosition(f"Position too short: {text!r}")

        col_part, row_part = _split_position(text)
        if not row_part:
            raise InvalidPosition(f"Invalid row number in position {text!r}")

        col = decode_column(col_part)
        row = int(row_part) - 1

        if not (0 <= row < size and 0 <= col < size):
            raise InvalidPosition(
                f"Position {text!r} out of bounds for board size {size}"
            )
        return row, col

    @staticmethod
    def _build_table(size: int) -> PositionTable:
        if size <= 0 or size > MAX_COLUMNS:
            raise InvalidPosition(f"Unsupported board size: {size}")
        columns = [encode_column(col) for col in range(size)]
        return tuple(
            tuple(f"{columns[col]}{row + 1}" for col in range(size))
            for row in range(size)
        )

