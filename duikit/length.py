"""Lengths in layout: automatic, percentage or fixed."""

from __future__ import annotations

import enum


class LengthType(enum.Enum):
    AUTO = enum.auto()
    PERCENT = enum.auto()
    FIXED = enum.auto()
    INTRINSIC = enum.auto()
    MIN_INTRINSIC = enum.auto()
    MIN_CONTENT = enum.auto()
    MAX_CONTENT = enum.auto()
    FILL_AVAILABLE = enum.auto()
    FIT_CONTENT = enum.auto()
    CALCULATED = enum.auto()
    EXTEND_TO_ZOOM = enum.auto()
    DEVICE_WIDTH = enum.auto()
    DEVICE_HEIGHT = enum.auto()
    MAX_SIZE_NONE = enum.auto()


class Length:
    """A typed length holding either an integer or a float value."""

    __slots__ = ("type", "_value")

    def __init__(self, length_type: LengthType = LengthType.AUTO, value: int | float = 0) -> None:
        self.type = length_type
        self._value = value

    @property
    def is_float(self) -> bool:
        return isinstance(self._value, float)

    def is_auto(self) -> bool:
        return self.type is LengthType.AUTO

    def is_percent(self) -> bool:
        return self.type is LengthType.PERCENT

    def is_fixed(self) -> bool:
        return self.type is LengthType.FIXED

    def percent(self) -> float:
        """Return the percentage; raises ValueError for other length types."""
        if not self.is_percent():
            raise ValueError(f"length is not a percentage: {self.type.name}")
        return float(self._value)

    def int_value(self) -> int:
        """Return the value truncated toward zero."""
        return int(self._value)

    def value(self) -> float:
        return float(self._value)

    def set_value(self, value: int | float, length_type: LengthType = LengthType.FIXED) -> None:
        """Set a new value and type; the type defaults to fixed."""
        self.type = length_type
        self._value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.type is other.type and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Length({self.type.name}, {self._value!r})"