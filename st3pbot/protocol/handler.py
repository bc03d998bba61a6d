"""Read loop and dispatch for the st3p line protocol."""

import logging
import sys
from typing import Iterable, Optional, TextIO

from ..config import EngineConfig
from ..engine.engine import MoveEngine
from ..errors import St3pError
from .commands import CommandType, classify, parse_move, parse_version
from .models import Identity

logger = logging.getLogger(__name__)


class ProtocolHandler:
    """Handles one command per line and writes responses to ``output``.

    Parsing errors are logged and the offending command skipped; they never
    stop the read loop. Only `quit` (or end of input) does.
    """

    def __init__(
        self,
        engine: Optional[MoveEngine] = None,
        output: Optional[TextIO] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.engine = engine if engine is not None else MoveEngine(config)
        self.config = self.engine.config
        self.output = output if output is not None else sys.stdout
        self.identity = Identity(
            name=self.config.bot_name,
            author=self.config.bot_author,
            version=self.config.bot_version,
        )
        self.moves_played = 0
        self.errors = 0

    def _write(self, line: str) -> None:
        self.output.write(line + "\n")
        self.output.flush()

    def handle_line(self, raw_line: str) -> bool:
        """Process one line. Returns False when the bot should stop."""
        line = raw_line.strip()
        if not line:
            return True

        command = classify(line)
        if command is None:
            return True

        if command is CommandType.QUIT:
            return False

        if command is CommandType.VERSION:
            version = parse_version(line)
            if version is not None:
                self._write(version.response())
        elif command is CommandType.IDENTIFY:
            for response in self.identity.response_lines():
                self._write(response)
        elif command is CommandType.MOVE:
            try:
                self._handle_move(line)
            except St3pError as e:
                self.errors += 1
                logger.warning(f"Error when parsing command {line!r}: {e}")

        return True

    def _handle_move(self, line: str) -> None:
        request = parse_move(line, self.config.default_win_length)
        board = self.engine.parse_board(request.board_state, request.win_length)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Current board:\n%s", board.to_display_string())

        time_limit_ms = request.time_limit_ms if request.has_deadline else 0
        result = self.engine.best_move(board, request.player_mark, time_limit_ms)
        self.moves_played += 1
        self._write(f"best {result.position}")

    def run(self, lines: Iterable[str]) -> int:
        """Consume lines until `quit` or end of input. Returns the exit code."""
        for raw_line in lines:
            if not self.handle_line(raw_line):
                logger.info("Received quit")
                break
        else:
            logger.info("Input closed")

        logger.info(f"Session finished: {self.moves_played} moves, {self.errors} errors")
        return 0
