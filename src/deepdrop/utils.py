from __future__ import annotations

from typing import TYPE_CHECKING

from deepdrop.config import METERS_TO_FEET

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt


def meters_to_feet(meters: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
    """Convert meters to feet."""
    return meters * METERS_TO_FEET
