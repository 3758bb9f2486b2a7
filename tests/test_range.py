from duikit.range import Range


def test_default_is_empty_and_valid():
    r = Range()
    assert r.is_empty()
    assert r.is_valid()
    assert r == Range(0, 0)


def test_single_position():
    assert Range(5) == Range(5, 5)


def test_invalid_range():
    assert not Range.invalid().is_valid()


def test_length_and_reversed():
    r = Range(8, 3)
    assert r.is_reversed()
    assert r.length() == Range(3, 8).length()
    assert r.min() == 3
    assert r.max() == 8


def test_equals_ignoring_direction():
    assert Range(2, 6).equals_ignoring_direction(Range(6, 2))
    assert Range(2, 6) != Range(6, 2)


def test_ordering_uses_start_only():
    assert Range(1, 100) < Range(2, 3)
    assert Range(4, 9) <= Range(4, 1)
    assert Range(5, 0) > Range(4, 10)
    assert Range(4, 9) >= Range(4, 1)


def test_intersects():
    assert Range(0, 5).intersects(Range(3, 8))
    assert not Range(0, 5).intersects(Range(5, 8))
    assert not Range(0, 5).intersects(Range.invalid())


def test_contains():
    assert Range(0, 10).contains(Range(2, 5))
    assert Range(10, 0).contains(Range(5, 2))
    assert not Range(0, 10).contains(Range(5, 11))
    assert not Range.invalid().contains(Range(0, 1))


def test_intersect_is_forward():
    result = Range(8, 2).intersect(Range(5, 10))
    assert result == Range(5, 8)
    assert not result.is_reversed()


def test_intersect_disjoint_is_invalid():
    assert not Range(0, 2).intersect(Range(3, 5)).is_valid()