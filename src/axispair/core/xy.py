"""
Summary: Generic container holding one value per axis, with per-axis combinators.
Why: Layout code computes widths, offsets and constraints once for both axes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from copy import copy
from dataclasses import dataclass

from axispair.core.orientation import Orientation
from axispair.platform.logging import logger


class PairArityError(ValueError):
    """Raised when a pair conversion receives other than exactly two values."""

    def __init__(self, size: int) -> None:
        super().__init__(f"Expected exactly 2 values (x, y), got {size}")
        self.size: int = size


@dataclass
class XY[T]:
    """A value for each axis.

    Every operation except ``set``, ``set_axis_from`` and slot writes returns a
    new ``XY`` and leaves the receiver untouched.
    """

    x: T
    """Horizontal axis value."""

    y: T
    """Vertical axis value."""

    @classmethod
    def new(cls, x: T, y: T) -> XY[T]:
        """Create a pair from the given values."""
        return cls(x, y)

    @classmethod
    def both_from(cls, value: T) -> XY[T]:
        """Create a pair with ``value`` on both axes."""
        return cls(value, copy(value))

    @classmethod
    def from_pair(cls, pair: Iterable[T]) -> XY[T]:
        """Create a pair from an ``(x, y)`` tuple or any two-item iterable.

        Raises:
            PairArityError: If ``pair`` does not hold exactly two values.
        """
        values = tuple(pair)
        if len(values) != 2:
            logger.debug("Rejected pair conversion of %d values", len(values))
            raise PairArityError(len(values))
        x, y = values
        return cls(x, y)

    @classmethod
    def zipped[U](cls, first: XY[T], second: XY[U]) -> XY[tuple[T, U]]:
        """Combine two pairs into a pair of tuples, same as ``first.zip(second)``."""
        return first.zip(second)

    # Access ------------------------------------------------------------------

    def pair(self) -> tuple[T, T]:
        """Destructure into an ``(x, y)`` tuple."""
        return (self.x, self.y)

    def to_pair(self) -> tuple[T, T]:
        """Same as ``pair``."""
        return self.pair()

    def iter(self) -> Iterator[T]:
        """Iterate over ``x``, then ``y``."""
        yield self.x
        yield self.y

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def get(self, axis: Orientation) -> T:
        """Return the value on the given axis."""
        return axis.get(self)

    def get_mut(self, axis: Orientation) -> AxisSlot[T]:
        """Return a writable view of the value on the given axis."""
        return AxisSlot(self, axis)

    def set(self, axis: Orientation, value: T) -> None:
        """Set the value on the given axis, in place."""
        axis.set(self, value)

    def clone(self) -> XY[T]:
        """Return a copy whose fields are shallow copies of this pair's fields."""
        return XY(copy(self.x), copy(self.y))

    # Combinators -------------------------------------------------------------

    def fold[U](self, f: Callable[[T, T], U]) -> U:
        """Return ``f(x, y)``."""
        return f(self.x, self.y)

    def map[U](self, f: Callable[[T], U]) -> XY[U]:
        """Create a new pair by applying ``f`` to ``x`` and ``y``."""
        return XY(f(self.x), f(self.y))

    def map_if(self, condition: XY[bool], f: Callable[[T], T]) -> XY[T]:
        """Apply ``f`` on axes where ``condition`` is true.

        Carries over ``self`` otherwise.
        """
        return self.zip_map(condition, lambda value, flag: f(value) if flag else value)

    def map_x(self, f: Callable[[T], T]) -> XY[T]:
        """Create a new pair by applying ``f`` to ``x``, carrying ``y`` over."""
        return XY(f(self.x), self.y)

    def map_y(self, f: Callable[[T], T]) -> XY[T]:
        """Create a new pair by applying ``f`` to ``y``, carrying ``x`` over."""
        return XY(self.x, f(self.y))

    def zip[U](self, other: XY[U]) -> XY[tuple[T, U]]:
        """Return a pair of tuples made by zipping ``self`` and ``other``."""
        return XY((self.x, other.x), (self.y, other.y))

    def zip_map[U, V](self, other: XY[U], f: Callable[[T, U], V]) -> XY[V]:
        """Return a new pair by calling ``f`` on ``self`` and ``other`` for each axis."""
        return XY(f(self.x, other.x), f(self.y, other.y))

    def with_axis(self, axis: Orientation, value: T) -> XY[T]:
        """Return a copy with ``axis`` set to ``value``."""
        new = self.clone()
        new.set(axis, value)
        return new

    def with_axis_from(self, axis: Orientation, other: XY[T]) -> XY[T]:
        """Return a copy with ``axis`` set to the value from ``other``."""
        new = self.clone()
        new.set_axis_from(axis, other)
        return new

    def set_axis_from(self, axis: Orientation, other: XY[T]) -> None:
        """Set ``axis`` on ``self`` to a copy of the value from ``other``."""
        self.set(axis, copy(other.get(axis)))

    # Optional values ---------------------------------------------------------

    def unwrap_or[U](self: XY[U | None], defaults: XY[U]) -> XY[U]:
        """Replace absent (``None``) axis values with the ones from ``defaults``."""
        return self.zip_map(defaults, lambda value, default: default if value is None else value)

    # Boolean selectors -------------------------------------------------------

    def any(self: XY[bool]) -> bool:
        """Return ``True`` if either ``x`` or ``y`` is true."""
        return self.fold(lambda x, y: bool(x) or bool(y))

    def both(self: XY[bool]) -> bool:
        """Return ``True`` if both ``x`` and ``y`` are true."""
        return self.fold(lambda x, y: bool(x) and bool(y))

    def select[U](self: XY[bool], other: XY[U]) -> XY[U | None]:
        """For each axis, keep the value from ``other`` where ``self`` is true."""
        return self.zip_map(other, lambda keep, value: value if keep else None)

    def select_or[U](self: XY[bool], if_true: XY[U], if_false: XY[U]) -> XY[U]:
        """For each axis, pick ``if_true`` where ``self`` is true, else ``if_false``."""
        return self.zip_map(
            if_true.zip(if_false), lambda flag, choices: choices[0] if flag else choices[1]
        )


AxisPair = XY


class AxisSlot[T]:
    """Writable view of one axis of one ``XY``.

    The slot reads and writes through ``axis`` only, so slots taken on
    different axes of the same pair never touch each other's value.
    """

    __slots__ = ("_owner", "_axis")

    def __init__(self, owner: XY[T], axis: Orientation) -> None:
        self._owner: XY[T] = owner
        self._axis: Orientation = axis

    @property
    def axis(self) -> Orientation:
        """Axis this slot reads and writes."""
        return self._axis

    @property
    def value(self) -> T:
        """Current value on the slot's axis."""
        return self._axis.get(self._owner)

    @value.setter
    def value(self, value: T) -> None:
        self._axis.set(self._owner, value)

    def get(self) -> T:
        """Return the current value."""
        return self.value

    def set(self, value: T) -> None:
        """Overwrite the value on the owner's axis."""
        self.value = value

    def update(self, f: Callable[[T], T]) -> T:
        """Replace the value with ``f(value)`` and return the new value."""
        self.value = f(self.value)
        return self.value

    def __repr__(self) -> str:
        return f"AxisSlot(axis={self._axis.value!r}, value={self.value!r})"


__all__ = ["AxisPair", "AxisSlot", "PairArityError", "XY"]
