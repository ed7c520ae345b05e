"""
Summary: Two-valued axis selector used to address one field of an XY pair.
Why: Let layout code pick an axis at runtime without branching on it per call site.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Final, assert_never

from axispair.platform.logging import logger

if TYPE_CHECKING:
    from axispair.core.xy import XY

# Short names accepted by Orientation.parse.
_ALIASES: Final[dict[str, str]] = {
    "x": "horizontal",
    "h": "horizontal",
    "y": "vertical",
    "v": "vertical",
}


class UnknownOrientationError(ValueError):
    """Raised when a value cannot be resolved to an orientation."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown orientation: {value!r}")
        self.value: object = value


class Orientation(StrEnum):
    """Axis selector: horizontal picks ``x``, vertical picks ``y``."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def get[T](self, xy: XY[T]) -> T:
        """Return the value of ``xy`` on this axis."""

        match self:
            case Orientation.HORIZONTAL:
                return xy.x
            case Orientation.VERTICAL:
                return xy.y
            case _:
                assert_never(self)

    def set[T](self, xy: XY[T], value: T) -> None:
        """Write ``value`` into ``xy`` on this axis, in place."""

        match self:
            case Orientation.HORIZONTAL:
                xy.x = value
            case Orientation.VERTICAL:
                xy.y = value
            case _:
                assert_never(self)

    @classmethod
    def parse(cls, value: Orientation | str) -> Orientation:
        """Resolve a member, canonical name or short alias to an orientation.

        Args:
            value: ``Orientation`` member, or a string such as ``"vertical"``,
                ``"Y"`` or ``" h "``.

        Returns:
            Orientation: The matching member.

        Raises:
            UnknownOrientationError: If ``value`` names neither axis.
        """
        if isinstance(value, Orientation):
            return value
        if not isinstance(value, str):
            raise UnknownOrientationError(value)

        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            resolved = cls(key)
        except ValueError:
            logger.debug("Rejected orientation value %r", value)
            raise UnknownOrientationError(value) from None

        logger.debug("Resolved orientation %r -> %s", value, resolved, extra={"axis": resolved})
        return resolved


__all__ = ["Orientation", "UnknownOrientationError"]
