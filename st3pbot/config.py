"""Centralized configuration for the st3p bot.

Protocol defaults, board limits and the identity reported by the
``identify`` command live here.
"""

import logging
from dataclasses import dataclass

from . import __version__
from .board.board import DEFAULT_MAX_BOARD_SIZE, DEFAULT_WIN_LENGTH


# ============================================================================
# Engine Configuration
# ============================================================================

@dataclass
class EngineConfig:
    """Limits and defaults for parsing and move computation"""
    # Board
    max_board_size: int = DEFAULT_MAX_BOARD_SIZE
    default_win_length: int = DEFAULT_WIN_LENGTH

    # Time-bounded execution
    executor_workers: int = 2

    # Identity (reported by `identify`)
    bot_name: str = "st3pbot"
    bot_author: str = "st3pbot developers"
    bot_version: str = __version__

    @classmethod
    def from_args(cls, args) -> 'EngineConfig':
        """Build a config from parsed command-line arguments."""
        defaults = cls()
        return cls(
            max_board_size=getattr(args, 'max_board_size', defaults.max_board_size),
            default_win_length=getattr(args, 'default_win_length', defaults.default_win_length),
            executor_workers=getattr(args, 'workers', defaults.executor_workers),
            bot_name=getattr(args, 'name', None) or defaults.bot_name,
            bot_author=getattr(args, 'author', None) or defaults.bot_author,
        )


# ============================================================================
# Helper Functions
# ============================================================================

def log_config_summary(config: EngineConfig, logger: logging.Logger) -> None:
    """Log the active configuration (stdout is reserved for the protocol)"""
    logger.info("=" * 60)
    logger.info(f"{config.bot_name} {config.bot_version} by {config.bot_author}")
    logger.info("=" * 60)
    logger.info(f"Max board size: {config.max_board_size}")
    logger.info(f"Default win length: {config.default_win_length}")
    logger.info(f"Executor workers: {config.executor_workers}")


__all__ = [
    "EngineConfig",
    "log_config_summary",
]
