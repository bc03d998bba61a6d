"""Configuration validation utilities."""

from typing import List

from ..board.position_codec import MAX_COLUMNS


def validate_engine_config(
    max_board_size: int,
    default_win_length: int,
    executor_workers: int
) -> List[str]:
    """Validate engine configuration.

    Args:
        max_board_size: Largest board accepted in board-state strings
        default_win_length: Win length used when a move omits `win-length`
        executor_workers: Worker threads for time-bounded move computation

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    # Column codes are at most two letters
    if max_board_size < 1 or max_board_size > MAX_COLUMNS:
        errors.append(
            f"❌ Invalid max board size: {max_board_size}\n"
            f"   Must be between 1 and {MAX_COLUMNS}\n"
            f"   Recommended: 100"
        )

    if default_win_length < 1:
        errors.append(
            f"❌ Invalid default win length: {default_win_length}\n"
            f"   Must be a positive integer\n"
            f"   Recommended: 3 (tic-tac-toe) or 5 (gomoku)"
        )

    if executor_workers < 1 or executor_workers > 32:
        errors.append(
            f"❌ Invalid executor workers: {executor_workers}\n"
            f"   Must be between 1 and 32\n"
            f"   Recommended: 2"
        )

    return errors


def print_validation_errors(errors: List[str], logger) -> None:
    """Log validation errors.

    Args:
        errors: List of error messages
        logger: Logger instance
    """
    if errors:
        logger.error("Configuration validation failed:")
        logger.error("")
        for error in errors:
            logger.error(error)
        logger.error("")
        logger.error("Please fix the configuration and try again.")
