"""Per-axis value container for layout and geometry code.

Where: src/axispair/__init__.py
What: Re-export the container, its axis selector and their errors.
Why: Callers write ``from axispair import XY, Orientation`` and nothing deeper.
"""

from axispair.core import (
    XY,
    AxisPair,
    AxisSlot,
    Orientation,
    PairArityError,
    UnknownOrientationError,
)

__version__ = "0.1.0"

__all__ = [
    "AxisPair",
    "AxisSlot",
    "Orientation",
    "PairArityError",
    "UnknownOrientationError",
    "XY",
    "__version__",
]
