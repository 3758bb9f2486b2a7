"""Ranges of positions, possibly reversed."""

from __future__ import annotations

_INVALID_POSITION = 2**64 - 1


class Range:
    """A start and end position; ``end`` defaults to ``start``.

    Ordering compares only the start positions.
    """

    __slots__ = ("start", "end")

    def __init__(self, start: int = 0, end: int | None = None) -> None:
        self.start = start
        self.end = start if end is None else end

    @classmethod
    def invalid(cls) -> Range:
        """Return the range that marks "no range"."""
        return cls(_INVALID_POSITION)

    def is_valid(self) -> bool:
        return self != Range.invalid()

    def length(self) -> int:
        """Absolute distance between start and end."""
        return abs(self.end - self.start)

    def is_reversed(self) -> bool:
        return self.start > self.end

    def is_empty(self) -> bool:
        return self.start == self.end

    def min(self) -> int:
        return min(self.start, self.end)

    def max(self) -> int:
        return max(self.start, self.end)

    def equals_ignoring_direction(self, other: Range) -> bool:
        return self.min() == other.min() and self.max() == other.max()

    def intersects(self, other: Range) -> bool:
        return (
            self.is_valid()
            and other.is_valid()
            and not (other.max() < self.min() or other.min() >= self.max())
        )

    def contains(self, other: Range) -> bool:
        return (
            self.is_valid()
            and other.is_valid()
            and self.min() <= other.min()
            and other.max() <= self.max()
        )

    def intersect(self, other: Range) -> Range:
        """Return the forward overlap, or an invalid range if there is none."""
        lo = max(self.min(), other.min())
        hi = min(self.max(), other.max())
        if lo >= hi:
            return Range.invalid()
        return Range(lo, hi)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Range) -> bool:
        return self.start < other.start

    def __le__(self, other: Range) -> bool:
        return self.start <= other.start

    def __gt__(self, other: Range) -> bool:
        return self.start > other.start

    def __ge__(self, other: Range) -> bool:
        return self.start >= other.start

    def __repr__(self) -> str:
        return f"Range({self.start}, {self.end})"