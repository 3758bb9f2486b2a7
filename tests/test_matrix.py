import math

import pytest

from duikit.geometry import Point, Rect, Size
from duikit.matrix import Matrix


def test_identity_leaves_point_unchanged():
    assert Matrix().apply_point(Point(7, -3)) == Point(7, -3)


def test_identity_leaves_rect_unchanged():
    assert Matrix().apply_rect(Rect(1, 2, 3, 4)) == Rect(1, 2, 3, 4)


def test_scale_point():
    assert Matrix().scale(2, 3).apply_point(Point(1, 1)) == Point(2, 3)


def test_scale_rect():
    assert Matrix().scale(2, 2).apply_rect(Rect(1, 1, 2, 2)) == Rect(2, 2, 4, 4)


def test_translate_identity_moves_point():
    assert Matrix().translate(3, 4).apply_point(Point(0, 0)) == Point(3, 4)


def test_apply_size_ignores_translation():
    m = Matrix(tx=100, ty=100)
    assert m.apply_size(Size(5, 6)) == Size(5, 6)


def test_apply_size_clamps_negative():
    assert Matrix().scale(-1, 1).apply_size(Size(3, 4)) == Size(0, 4)


def test_rotate_quarter_turn_swaps_axes():
    m = Matrix().rotate(math.pi / 2)
    assert m.a == pytest.approx(0, abs=1e-12)
    assert m.d == pytest.approx(0, abs=1e-12)
    assert m.b == pytest.approx(1)
    assert m.c == pytest.approx(-1)


def test_concat_with_identity():
    m = Matrix(2, 0.5, 1, 3, 4, 5)
    assert m.concat(Matrix()) == m
    assert Matrix().concat(m) == m


def test_concat_transform_matches_concat():
    m = Matrix(2, 0, 0, 2, 1, 1)
    other = Matrix(1, 0, 0, 1, 5, 6)
    expected = m.concat(other)
    m.concat_transform(other)
    assert m == expected


def test_invert_round_trip():
    m = Matrix(2, 1, 1, 3, 4, 5)
    product = m.concat(m.invert())
    for got, want in zip(
        (product.a, product.b, product.c, product.d, product.tx, product.ty),
        (1, 0, 0, 1, 0, 0),
    ):
        assert got == pytest.approx(want, abs=1e-9)


def test_invert_singular_raises():
    with pytest.raises(ValueError):
        Matrix(1, 2, 2, 4, 0, 0).invert()


def test_set_transform():
    m = Matrix()
    m.set_transform(1, 2, 3, 4, 5, 6)
    assert m == Matrix(1, 2, 3, 4, 5, 6)