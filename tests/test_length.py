import pytest

from duikit.length import Length, LengthType


def test_default_is_auto_zero():
    length = Length()
    assert length.is_auto()
    assert not length.is_fixed()
    assert length.int_value() == 0


def test_fixed_int_value():
    length = Length(LengthType.FIXED, 12)
    assert length.is_fixed()
    assert length.int_value() == 12
    assert length.value() == 12.0
    assert not length.is_float


def test_float_truncates_to_int():
    length = Length(LengthType.FIXED, 7.9)
    assert length.is_float
    assert length.int_value() == 7
    assert length.value() == 7.9


def test_percent():
    length = Length(LengthType.PERCENT, 0.5)
    assert length.is_percent()
    assert length.percent() == 0.5


def test_percent_on_other_type_raises():
    with pytest.raises(ValueError):
        Length(LengthType.FIXED, 3).percent()


def test_set_value_defaults_to_fixed():
    length = Length(LengthType.PERCENT, 0.25)
    length.set_value(4.5)
    assert length.is_fixed()
    assert length.value() == 4.5


def test_set_value_with_type():
    length = Length()
    length.set_value(30, LengthType.PERCENT)
    assert length == Length(LengthType.PERCENT, 30)
    assert length.percent() == 30.0