"""Integer points, sizes, insets and rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A point with integer x and y coordinates."""

    x: int = 0
    y: int = 0

    def offset(self, dx: int, dy: int) -> None:
        """Move the point by the given deltas."""
        self.x += dx
        self.y += dy


class Size:
    """A width and height; negative dimensions are clamped to zero."""

    __slots__ = ("_width", "_height")

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = 0
        self._height = 0
        self.set_size(width, height)

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = max(value, 0)

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = max(value, 0)

    def area(self) -> int:
        """Return width times height."""
        return self._width * self._height

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def enlarge(self, width: int, height: int) -> None:
        """Grow (or shrink, with negative values) each dimension."""
        self.set_size(self._width + width, self._height + height)

    def is_empty(self) -> bool:
        return self._width == 0 or self._height == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self._width == other._width and self._height == other._height

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Size({self._width}, {self._height})"


@dataclass
class Inseting:
    """Distances by which each side of a rectangle is pulled in."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def is_empty(self) -> bool:
        return self.left == 0 and self.top == 0 and self.right == 0 and self.bottom == 0


def _adjust_along_axis(dst_origin: int, dst_size: int, origin: int, size: int) -> tuple[int, int]:
    if origin < dst_origin:
        return dst_origin, min(dst_size, size)
    size = min(dst_size, size)
    return min(dst_origin + dst_size, origin + size) - size, size


class Rect:
    """An axis-aligned rectangle with an integer origin and a non-negative size."""

    __slots__ = ("x", "y", "_size")

    def __init__(self, x: int = 0, y: int = 0, width: int = 0, height: int = 0) -> None:
        self.x = x
        self.y = y
        self._size = Size(width, height)

    @property
    def width(self) -> int:
        return self._size.width

    @width.setter
    def width(self, value: int) -> None:
        self._size.width = value

    @property
    def height(self) -> int:
        return self._size.height

    @height.setter
    def height(self, value: int) -> None:
        self._size.height = value

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @origin.setter
    def origin(self, point: Point) -> None:
        self.x, self.y = point.x, point.y

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def _copy(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def set_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self._size.set_size(width, height)

    def inset(self, left: int, top: int, right: int | None = None, bottom: int | None = None) -> None:
        """Shrink by the given amount on each side.

        With only two arguments they are the horizontal and vertical amounts
        applied to both opposite sides.
        """
        if right is None:
            right = left
        if bottom is None:
            bottom = top
        self.offset(left, top)
        self.width = max(self.width - left - right, 0)
        self.height = max(self.height - top - bottom, 0)

    def inset_by(self, inseting: Inseting) -> None:
        self.inset(inseting.left, inseting.top, inseting.right, inseting.bottom)

    def offset(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def is_empty(self) -> bool:
        return self._size.is_empty()

    def contains_point(self, x: int, y: int) -> bool:
        """True if (x, y) lies inside; the right and bottom edges are excluded."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def contains(self, other: Rect | Point) -> bool:
        """True if this rectangle contains the given rectangle or point."""
        if isinstance(other, Point):
            return self.contains_point(other.x, other.y)
        return (
            other.x >= self.x
            and other.right <= self.right
            and other.y >= self.y
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Rect) -> bool:
        return not (
            other.x >= self.right
            or other.right <= self.x
            or other.y >= self.bottom
            or other.bottom <= self.y
        )

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap, or an all-zero rectangle if there is none."""
        rx = max(self.x, other.x)
        ry = max(self.y, other.y)
        rr = min(self.right, other.right)
        rb = min(self.bottom, other.bottom)
        if rx >= rr or ry >= rb:
            return Rect()
        return Rect(rx, ry, rr - rx, rb - ry)

    def union(self, other: Rect) -> Rect:
        """Return the smallest rectangle holding both; empty rectangles are ignored."""
        if self.is_empty():
            return other._copy()
        if other.is_empty():
            return self._copy()
        rx = min(self.x, other.x)
        ry = min(self.y, other.y)
        rr = max(self.right, other.right)
        rb = max(self.bottom, other.bottom)
        return Rect(rx, ry, rr - rx, rb - ry)

    def subtract(self, other: Rect) -> Rect:
        """Remove ``other`` where it spans this rectangle fully along one axis."""
        if not self.intersects(other):
            return self._copy()
        if other.contains(self):
            return Rect()

        rx, ry, rr, rb = self.x, self.y, self.right, self.bottom
        if other.y <= self.y and other.bottom >= self.bottom:
            if other.x <= self.x:
                rx = other.right
            else:
                rr = other.x
        elif other.x <= self.x and other.right >= self.right:
            if other.y <= self.y:
                ry = other.bottom
            else:
                rb = other.y
        return Rect(rx, ry, rr - rx, rb - ry)

    def adjust_to_fit(self, other: Rect) -> Rect:
        """Fit as much of this rectangle as possible inside ``other``."""
        x, width = _adjust_along_axis(other.x, other.width, self.x, self.width)
        y, height = _adjust_along_axis(other.y, other.height, self.y, self.height)
        return Rect(x, y, width, height)

    def center_point(self) -> Point:
        return Point(self.x + (self.width + 1) // 2, self.y + (self.height + 1) // 2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self._size == other._size

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Rect({self.x}, {self.y}, {self.width}, {self.height})"