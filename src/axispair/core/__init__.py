# Path: `src/axispair/core/__init__.py`
# Summary: Export the axis selector and the per-axis value container.
# Why: Provide a stable import surface for layout code and tests.

from .orientation import Orientation, UnknownOrientationError
from .xy import XY, AxisPair, AxisSlot, PairArityError

__all__ = [
    "AxisPair",
    "AxisSlot",
    "Orientation",
    "PairArityError",
    "UnknownOrientationError",
    "XY",
]
