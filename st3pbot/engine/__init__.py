"""Move computation: win detection, heuristic selection and deadlines."""

from .engine import MoveEngine, MoveResult
from .executor import MAX_TIME_LIMIT_MS, ExecutionResult, TimeBoundedExecutor
from .move_selector import MoveDecision, MoveSelector, SelectionRule
from .win_detector import WinDetector

__all__ = [
    "MoveEngine",
    "MoveResult",
    "MAX_TIME_LIMIT_MS",
    "ExecutionResult",
    "TimeBoundedExecutor",
    "MoveDecision",
    "MoveSelector",
    "SelectionRule",
    "WinDetector",
]
