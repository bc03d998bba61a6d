"""Pytest configuration and shared fixtures."""

import io

import pytest

from st3pbot.board import Board, PositionCodec
from st3pbot.config import EngineConfig
from st3pbot.engine import MoveEngine, MoveSelector, TimeBoundedExecutor, WinDetector
from st3pbot.protocol import ProtocolHandler


@pytest.fixture
def codec():
    """Fresh position codec with no cached tables."""
    return PositionCodec()


@pytest.fixture
def win_detector():
    return WinDetector()


@pytest.fixture
def selector(win_detector):
    return MoveSelector(win_detector)


@pytest.fixture
def executor():
    """Executor that is shut down after the test."""
    ex = TimeBoundedExecutor(max_workers=2)
    yield ex
    ex.close()


@pytest.fixture
def engine(codec, selector, executor):
    return MoveEngine(EngineConfig(), codec=codec, selector=selector, executor=executor)


@pytest.fixture
def small_board():
    """Empty tic-tac-toe board."""
    return Board.empty(3, win_length=3)


@pytest.fixture
def medium_board():
    """Empty 9x9 board with win length 4."""
    return Board.empty(9, win_length=4)


@pytest.fixture
def protocol_output():
    return io.StringIO()


@pytest.fixture
def handler(engine, protocol_output):
    """Protocol handler writing into an in-memory buffer."""
    return ProtocolHandler(engine, output=protocol_output)


@pytest.fixture
def run_session(handler, protocol_output):
    """Feed protocol lines to the handler and return the output lines."""
    def _run(*lines):
        exit_code = handler.run(lines)
        assert exit_code == 0
        return protocol_output.getvalue().splitlines()

    return _run


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit test")
    config.addinivalue_line("markers", "integration: Integration test")
    config.addinivalue_line("markers", "slow: Slow test")
    config.addinivalue_line("markers", "timeout: Per-test time limit (pytest-timeout)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add automatic markers."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
