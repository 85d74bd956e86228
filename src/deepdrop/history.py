"""
Drop History
============
A short, newest-first list of recent measurements kept by the caller.

The solver itself is stateless; this container only exists so that a front
end can show the last few drops. Nothing is persisted.
"""
from __future__ import annotations

from collections import deque
import logging
from typing import Iterator, Optional

from deepdrop.config import HISTORY_LENGTH, HISTORY_MIN_DEPTH_M
from deepdrop.physics.solver import DepthResult

logger = logging.getLogger(__name__)


class DropHistory:
    """
    Bounded list of recent depth results, newest first.
    """

    def __init__(self, max_length: int = HISTORY_LENGTH, min_depth: float = HISTORY_MIN_DEPTH_M):
        """
        Args:
            max_length: Number of results to keep.
            min_depth: Results at or below this depth (meters) are not recorded.
        """
        if max_length < 1:
            raise ValueError(f"History length must be at least 1, got {max_length}.")

        self.max_length = max_length
        self.min_depth = min_depth
        self._results: deque[DepthResult] = deque(maxlen=max_length)

    def record(self, result: DepthResult) -> bool:
        """
        Add a result to the front of the history.

        Returns:
            True if the result was stored, False if it was too shallow.
        """
        if not result.depth_meters > self.min_depth:
            logger.debug(f"Skipping drop of {result.depth_meters:.3f} m (below {self.min_depth} m).")
            return False

        self._results.appendleft(result)
        return True

    def clear(self) -> None:
        self._results.clear()
        logger.info("Drop history has been cleared.")

    @property
    def latest(self) -> Optional[DepthResult]:
        return self._results[0] if self._results else None

    def __iter__(self) -> Iterator[DepthResult]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)
