"""Runs a bounded computation against an optional wall-clock deadline."""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')

# Longer budgets run without a deadline; half of TIMEOUT_MAX keeps
# monotonic() + timeout inside the platform clock range
MAX_TIME_LIMIT_MS = threading.TIMEOUT_MAX * 1000 / 2

logger = logging.getLogger(__name__)


@dataclass
class ExecutionResult(Generic[T]):
    """Value produced by :meth:`TimeBoundedExecutor.run`."""

    value: T
    timed_out: bool = False
    elapsed_ms: float = 0.0


class TimeBoundedExecutor:
    """Races a computation against a deadline.

    Without a time limit the computation runs on the calling thread. With
    one, it is submitted to a worker thread and awaited for at most the
    limit. If the deadline passes first the pending future is abandoned
    (its result is discarded) and ``fallback`` runs synchronously, so a
    result is always produced. Limits too large to wait on are treated as
    no limit.

    The abandoned computation keeps running in its worker. Callers must hand
    it state nothing else touches, e.g. a copy of the board.
    """

    def __init__(self, max_workers: int = 2):
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="st3p-move"
        )
        self.timeouts = 0

    def run(
        self,
        compute: Callable[[], T],
        fallback: Callable[[], T],
        time_limit_ms: Optional[float] = None,
    ) -> ExecutionResult[T]:
        """Run ``compute`` under ``time_limit_ms``.

        Args:
            compute: Computation to race against the deadline
            fallback: Run synchronously when the deadline fires first
            time_limit_ms: Budget in milliseconds; None, <= 0 or above
                MAX_TIME_LIMIT_MS means no race

        Returns:
            ExecutionResult with the value and whether the deadline fired
        """
        start = time.perf_counter()

        if not time_limit_ms or time_limit_ms <= 0 or time_limit_ms > MAX_TIME_LIMIT_MS:
            value = compute()
            return ExecutionResult(value, False, (time.perf_counter() - start) * 1000)

        future = self._pool.submit(compute)
        try:
            value = future.result(timeout=time_limit_ms / 1000.0)
            timed_out = False
        except FutureTimeoutError:
            self.timeouts += 1
            logger.debug(
                "Computation exceeded %.1f ms budget, using synchronous fallback",
                time_limit_ms,
            )
            value = fallback()
            timed_out = True

        return ExecutionResult(value, timed_out, (time.perf_counter() - start) * 1000)

    def close(self) -> None:
        """Release the worker threads; queued abandoned work never starts."""
        self._pool.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> 'TimeBoundedExecutor':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
