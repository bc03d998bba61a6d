"""Move engine tying together board parsing, move selection and deadlines."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..board.board import Board
from ..board.position_codec import PositionCodec
from ..config import EngineConfig
from .executor import TimeBoundedExecutor
from .move_selector import MoveDecision, MoveSelector, SelectionRule

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Outcome of a single move computation."""

    position: str
    row: int
    col: int
    rule: SelectionRule
    timed_out: bool = False
    elapsed_ms: float = 0.0


class MoveEngine:
    """Computes ``best`` moves for protocol commands.

    All collaborators can be injected; the position codec in particular is
    owned by the engine so its per-size tables live as long as the engine.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        codec: Optional[PositionCodec] = None,
        selector: Optional[MoveSelector] = None,
        executor: Optional[TimeBoundedExecutor] = None,
    ):
        self.config = config if config is not None else EngineConfig()
        self.codec = codec if codec is not None else PositionCodec()
        self.selector = selector if selector is not None else MoveSelector()
        self.executor = (
            executor if executor is not None
            else TimeBoundedExecutor(max_workers=self.config.executor_workers)
        )

    def parse_board(self, state: str, win_length: Optional[int] = None) -> Board:
        """Build a board from notation using the engine's limits."""
        return Board.from_state_string(
            state,
            win_length=win_length if win_length is not None else self.config.default_win_length,
            max_size=self.config.max_board_size,
        )

    def best_move(self, board: Board, player: int, time_limit_ms: float = 0) -> MoveResult:
        """Select a move for ``player``, racing a deadline when one is given.

        The raced computation works on a copy of ``board`` so that, if it is
        abandoned, it never touches the board used by the fallback.
        """
        background = board.copy() if time_limit_ms and time_limit_ms > 0 else board

        result = self.executor.run(
            lambda: self.selector.select(background, player),
            lambda: self.selector.select(board, player),
            time_limit_ms=time_limit_ms,
        )
        decision: MoveDecision = result.value

        position = self.codec.encode(board.size, decision.row, decision.col)
        logger.debug(
            f"Selected {position} by {decision.rule.value} rule in "
            f"{result.elapsed_ms:.2f} ms (timed out: {result.timed_out})"
        )
        return MoveResult(
            position=position,
            row=decision.row,
            col=decision.col,
            rule=decision.rule,
            timed_out=result.timed_out,
            elapsed_ms=result.elapsed_ms,
        )

    def close(self) -> None:
        self.executor.close()
