"""
Trajectory Samples
==================
Time/depth samples of a single drop: the free-fall parabola down to the
bottom of the shaft, then the sound front travelling back up in a straight
line. Depth is measured downwards from the release point.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from deepdrop.config import GRAVITY, TRAJECTORY_SEGMENTS

if TYPE_CHECKING:
    import numpy.typing as npt

    from deepdrop.physics.solver import DepthResult


@dataclass(frozen=True)
class DropTrajectory:
    fall_times: npt.NDArray[np.float64]
    fall_depths: npt.NDArray[np.float64]
    sound_times: npt.NDArray[np.float64]
    sound_depths: npt.NDArray[np.float64]

    @property
    def impact_time(self) -> float:
        return float(self.sound_times[0])

    @property
    def total_time(self) -> float:
        return float(self.sound_times[-1])

    def sound_depth_at(
        self, time: float | npt.NDArray[np.float64]
    ) -> float | npt.NDArray[np.float64]:
        """
        Depth of the sound front at the given time(s), clamped to the sound leg.
        """
        depths = np.interp(np.atleast_1d(time), self.sound_times, self.sound_depths)

        if np.isscalar(time):
            return float(depths[0])
        return depths


def sample_trajectory(
    result: DepthResult,
    segments: int = TRAJECTORY_SEGMENTS,
    gravity: float = GRAVITY,
) -> Optional[DropTrajectory]:
    """
    Sample the path of a drop described by a depth result.

    Args:
        result: Output of :func:`deepdrop.physics.solver.calculate`.
        segments: Number of straight segments used for the fall parabola.
        gravity: Gravitational acceleration in m/s².

    Returns:
        The trajectory, or None when the result has no depth to draw.
    """
    if segments < 1:
        raise ValueError(f"At least one segment is required, got {segments}.")

    depth = result.depth_meters
    if not depth > 0.0:
        return None

    fall_time = result.fall_time_seconds
    fall_times = np.linspace(0.0, fall_time, segments + 1)
    fall_depths = 0.5 * gravity * fall_times ** 2

    sound_times = np.array([fall_time, result.total_time_seconds], dtype=np.float64)
    sound_depths = np.array([depth, 0.0], dtype=np.float64)

    return DropTrajectory(
        fall_times=fall_times,
        fall_depths=fall_depths,
        sound_times=sound_times,
        sound_depths=sound_depths,
    )
