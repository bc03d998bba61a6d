"""Unit tests for the move-selection heuristic."""

import pytest

from st3pbot.board import PLAYER_O, PLAYER_X, Board
from st3pbot.engine import MoveSelector, SelectionRule, WinDetector
from st3pbot.engine.move_selector import CenterWindow


class TestOpening:
    """Rule 1: take the center."""

    @pytest.mark.parametrize("size,center", [(1, 0), (2, 1), (3, 1), (4, 2), (15, 7), (20, 10)])
    def test_empty_board_center(self, selector, size, center):
        decision = selector.select(Board.empty(size), PLAYER_X)
        assert decision.coords == (center, center)
        assert decision.rule is SelectionRule.OPENING

    def test_center_free_beats_win(self, selector):
        # X could win at (0, 2), but the free center is taken first
        board = Board.from_state_string("XX_/___/___")
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (1, 1)
        assert decision.rule is SelectionRule.OPENING


class TestWinAndBlock:
    """Rules 2 and 3: immediate wins and blocks in the center window."""

    def test_takes_winning_move(self, selector):
        board = Board.from_state_string("XX_/_O_/O__")
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (0, 2)
        assert decision.rule is SelectionRule.WIN

    def test_blocks_opponent(self, selector):
        board = Board.from_state_string("OO_/_X_/___")
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (0, 2)
        assert decision.rule is SelectionRule.BLOCK

    def test_win_preferred_over_block(self, selector):
        # O threatens the first column at (2, 0), which comes first in
        # row-major order; X completes the middle column at (2, 1)
        board = Board.from_state_string("OX_/OX_/___")
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (2, 1)
        assert decision.rule is SelectionRule.WIN

    def test_first_win_in_row_major_order(self, selector):
        board = Board.from_state_string("_X_/_X_/___")
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (2, 1)

    def test_same_board_for_o(self, selector):
        board = Board.from_state_string("XX_/_O_/O__")
        decision = selector.select(board, PLAYER_O)
        assert decision.coords == (0, 2)
        assert decision.rule is SelectionRule.WIN

    def test_board_unchanged_after_select(self, selector):
        board = Board.from_state_string("XX_/_O_/O__")
        before = board.copy()
        selector.select(board, PLAYER_X)
        selector.select(board, PLAYER_O)
        assert board == before

    def test_threat_outside_window_is_missed(self):
        # 15x15, win length 3: window covers rows/cols 4..10
        rows = ["15"] * 15
        rows[7] = "7X7"
        rows[0] = "OO13"
        board = Board.from_state_string("/".join(rows), win_length=3)
        decision = MoveSelector().select(board, PLAYER_X)
        assert decision.rule is SelectionRule.SPIRAL


class TestSpiral:
    """Rule 4: nearest free cell around the center."""

    def test_first_cell_of_ring(self, selector):
        board = Board.from_state_string("_____/_____/__X__/_____/_____", win_length=5)
        decision = selector.select(board, PLAYER_O)
        assert decision.coords == (1, 1)
        assert decision.rule is SelectionRule.SPIRAL

    def test_rescans_ring_interior(self, selector):
        # Only the center ring's top-left corner is taken; next is (1, 2)
        board = Board.from_state_string("_____/_O___/__X__/_____/_____", win_length=5)
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (1, 2)

    def test_outer_ring(self, selector):
        board = Board.from_state_string("_____/_OXO_/_XOX_/_OXO_/_____", win_length=5)
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (0, 0)
        assert decision.rule is SelectionRule.SPIRAL

    def test_clipped_to_board(self, selector):
        # 4x4, center (2, 2): the radius-2 square reaches past the last row and column
        board = Board.from_state_string("XOXO/XOXO/OXOX/_XOX", win_length=4)
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (3, 0)
        assert decision.rule is SelectionRule.SPIRAL


class TestFallback:
    """Rule 5: top-left when nothing else is found."""

    def test_full_board(self, selector):
        board = Board.from_state_string("XOX/XOO/OXX")
        decision = selector.select(board, PLAYER_X)
        assert decision.coords == (0, 0)
        assert decision.rule is SelectionRule.FALLBACK

    def test_spiral_reaches_corner_on_even_board(self, selector):
        # Spiral radius stops at size // 2 = 1 on a 2x2 board
        board = Board.from_state_string("_O/XX", win_length=3)
        decision = selector.select(board, PLAYER_O)
        assert decision.coords == (0, 0)
        assert decision.rule is SelectionRule.SPIRAL


class TestCenterWindow:
    """Window geometry."""

    def test_clipped_window(self):
        window = CenterWindow.for_board(Board.empty(3, win_length=3))
        assert (window.start, window.end) == (0, 2)

    def test_window_on_large_board(self):
        window = CenterWindow.for_board(Board.empty(15, win_length=3))
        assert (window.start, window.end) == (4, 10)
        cells = list(window.cells())
        assert cells[0] == (4, 4)
        assert cells[1] == (4, 5)
        assert len(cells) == 49


class TestSelectorValidation:

    def test_unknown_player(self, selector, small_board):
        with pytest.raises(ValueError):
            selector.select(small_board, 0)

    def test_uses_injected_detector(self):
        calls = []

        class RecordingDetector(WinDetector):
            def check_win(self, board, row, col, mark):
                calls.append((row, col, mark))
                return super().check_win(board, row, col, mark)

        selector = MoveSelector(RecordingDetector())
        decision = selector.select(Board.from_state_string("XX_/_O_/___"), PLAYER_X)
        assert decision.coords == (0, 2)
        assert calls[-1] == (0, 2, PLAYER_X)
