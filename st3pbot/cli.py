"""Command-line entry point for the st3p bot.

Reads protocol commands from stdin and writes responses to stdout. Logs go
to stderr (or ``--log-file``) so they never mix with protocol output.

Example:
    echo "move _________ X win-length 3" | st3pbot
    st3pbot --log-level DEBUG --default-win-length 5
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import EngineConfig, log_config_summary
from .engine.engine import MoveEngine
from .protocol.handler import ProtocolHandler
from .utils.validation import print_validation_errors, validate_engine_config


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Setup logging for the bot."""
    handler_kwargs = {'filename': log_file} if log_file else {'stream': sys.stderr}
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        **handler_kwargs
    )
    return logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='st3p protocol bot for N-in-a-row games')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Write logs to this file instead of stderr')
    parser.add_argument('--max-board-size', type=int, default=100,
                        help='Largest board size accepted in move commands')
    parser.add_argument('--default-win-length', type=int, default=3,
                        help='Win length when a move command has no win-length option')
    parser.add_argument('--workers', type=int, default=2,
                        help='Worker threads for time-limited move computation')
    parser.add_argument('--name', type=str, default=None,
                        help='Bot name reported by identify')
    parser.add_argument('--author', type=str, default=None,
                        help='Bot author reported by identify')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger = setup_logging(args.log_level, args.log_file)

    validation_errors = validate_engine_config(
        args.max_board_size,
        args.default_win_length,
        args.workers
    )
    if validation_errors:
        print_validation_errors(validation_errors, logger)
        return 2

    config = EngineConfig.from_args(args)
    log_config_summary(config, logger)

    engine = MoveEngine(config)
    try:
        handler = ProtocolHandler(engine, output=sys.stdout)
        return handler.run(sys.stdin)
    finally:
        engine.close()


if __name__ == "__main__":
    sys.exit(main())
