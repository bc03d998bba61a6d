"""Cell states and their wire characters."""

from typing import Dict

EMPTY = 0
PLAYER_X = 1
PLAYER_O = -1

EMPTY_CHAR = '_'

MARK_TO_CHAR: Dict[int, str] = {EMPTY: EMPTY_CHAR, PLAYER_X: 'X', PLAYER_O: 'O'}
CHAR_TO_MARK: Dict[str, int] = {'X': PLAYER_X, 'O': PLAYER_O}


def opponent(mark: int) -> int:
    """Return the other player's mark."""
    return -mark


def is_player(mark: int) -> bool:
    return mark in (PLAYER_X, PLAYER_O)
