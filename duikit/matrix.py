"""Affine 2-D transformation matrices.

The matrix maps a point as::

    [ a, c, tx ] [x]   [a*x + c*y + tx]
    [ b, d, ty ] [y] = [b*x + d*y + ty]
    [ 0, 0, 1  ] [1]   [1             ]
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from duikit.geometry import Point, Rect, Size


@dataclass
class Matrix:
    """An affine transform; the default is the identity."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def set_transform(self, a: float, b: float, c: float, d: float, tx: float, ty: float) -> None:
        """Replace all six coefficients."""
        self.a, self.b, self.c, self.d, self.tx, self.ty = a, b, c, d, tx, ty

    def apply_point(self, point: Point) -> Point:
        """Transform a point, rounding each coordinate down."""
        x = math.floor(self.a * point.x + self.c * point.y + self.tx)
        y = math.floor(self.b * point.x + self.d * point.y + self.ty)
        return Point(int(x), int(y))

    def apply_size(self, size: Size) -> Size:
        """Transform a size, ignoring translation; negative results clamp to zero."""
        w = math.floor(self.a * size.width + self.c * size.height)
        h = math.floor(self.b * size.width + self.d * size.height)
        return Size(int(w), int(h))

    def apply_rect(self, rect: Rect) -> Rect:
        """Return the bounding box of the transformed corners of ``rect``."""
        corners = [
            self.apply_point(Point(x, y))
            for x in (rect.x, rect.right)
            for y in (rect.y, rect.bottom)
        ]
        min_x = min(p.x for p in corners)
        max_x = max(p.x for p in corners)
        min_y = min(p.y for p in corners)
        max_y = max(p.y for p in corners)
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    def translate(self, x: float, y: float) -> Matrix:
        """Return this matrix followed by a translation."""
        return Matrix(
            self.a,
            self.b,
            self.c,
            self.d,
            self.tx + self.a * x + self.c * y,
            y + self.b * self.tx + self.d * self.ty,
        )

    def rotate(self, angle: float) -> Matrix:
        """Return this matrix rotated by ``angle`` radians."""
        s = math.sin(angle)
        co = math.cos(angle)
        return Matrix(
            self.a * co + self.c * s,
            self.b * co + self.d * s,
            self.c * co - self.a * s,
            self.d * co - self.b * s,
            self.tx,
            self.ty,
        )

    def scale(self, sx: float, sy: float) -> Matrix:
        """Return this matrix scaled along each axis."""
        return Matrix(self.a * sx, self.b * sx, self.c * sy, self.d * sy, self.tx, self.ty)

    def concat(self, other: Matrix) -> Matrix:
        """Return the product of this matrix with ``other``."""
        return Matrix(
            self.a * other.a + self.b * other.c,
            self.a * other.b + self.b * other.d,
            self.c * other.a + self.d * other.c,
            self.c * other.b + self.d * other.d,
            self.tx * other.a + self.ty * other.c + other.tx,
            self.tx * other.b + self.ty * other.d + other.ty,
        )

    def concat_transform(self, other: Matrix) -> None:
        """Multiply this matrix by ``other`` in place."""
        product = self.concat(other)
        self.set_transform(product.a, product.b, product.c, product.d, product.tx, product.ty)

    def invert(self) -> Matrix:
        """Return the inverse matrix.

        Raises ValueError if the matrix is singular.
        """
        det = self.a * self.d - self.b * self.c
        if det == 0:
            raise ValueError("matrix is not invertible")
        k = 1 / det
        return Matrix(
            k * self.d,
            -k * self.b,
            -k * self.c,
            k * self.a,
            k * (self.c * self.ty - self.d * self.tx),
            k * (self.b * self.tx - self.a * self.ty),
        )