"""
DeepDrop
========
Estimates the depth of a vertical shaft from the time between dropping an
object and hearing it hit the bottom, accounting for the travel time of the
impact sound back up the shaft.

The physics lives in :mod:`deepdrop.physics`; it is pure Python/NumPy and has
no knowledge of how the elapsed time was measured or how results are shown.
"""
from deepdrop.physics.solver import DepthResult, calculate

__all__ = ["DepthResult", "calculate"]
