"""A tree of typed values: null, booleans, numbers, strings and lists."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from duikit.dictionary import DictionaryValue


class ValueType(enum.Enum):
    NULL = 0
    BOOLEAN = 1
    INTEGER = 2
    DOUBLE = 3
    STRING = 4
    BINARY = 5
    DICTIONARY = 6
    LIST = 7


class Value:
    """Base of every value; on its own it is the null value.

    The ``as_*`` accessors raise TypeError when the value is not of the
    requested kind.
    """

    def __init__(self, value_type: ValueType = ValueType.NULL) -> None:
        self.type = value_type

    @classmethod
    def create_null(cls) -> Value:
        """Return a new null value."""
        return Value(ValueType.NULL)

    def is_type(self, value_type: ValueType) -> bool:
        return self.type is value_type

    def _wrong_type(self, wanted: str) -> TypeError:
        return TypeError(f"{self.type.name.lower()} value is not {wanted}")

    def as_bool(self) -> bool:
        raise self._wrong_type("a boolean")

    def as_int(self) -> int:
        raise self._wrong_type("an integer")

    def as_float(self) -> float:
        raise self._wrong_type("a number")

    def as_str(self) -> str:
        raise self._wrong_type("a string")

    def as_list(self) -> ListValue:
        raise self._wrong_type("a list")

    def as_dictionary(self) -> DictionaryValue:
        raise self._wrong_type("a dictionary")

    def deep_copy(self) -> Value:
        """Return an independent copy of the whole value tree."""
        return Value.create_null()

    def equals(self, other: Value) -> bool:
        """True if ``other`` holds the same type and contents."""
        return other.is_type(ValueType.NULL)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Value(NULL)"


def values_equal(a: Value | None, b: Value | None) -> bool:
    """Compare two values where either may be missing."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.equals(b)


class FundamentalValue(Value):
    """A boolean, integer or finite floating-point value."""

    def __init__(self, value: bool | int | float) -> None:
        if isinstance(value, bool):
            super().__init__(ValueType.BOOLEAN)
        elif isinstance(value, int):
            super().__init__(ValueType.INTEGER)
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError("non-finite numbers cannot be stored as values")
            super().__init__(ValueType.DOUBLE)
        else:
            raise TypeError(f"unsupported fundamental value: {value!r}")
        self._value = value

    def as_bool(self) -> bool:
        if self.type is not ValueType.BOOLEAN:
            raise self._wrong_type("a boolean")
        return bool(self._value)

    def as_int(self) -> int:
        if self.type is not ValueType.INTEGER:
            raise self._wrong_type("an integer")
        return int(self._value)

    def as_float(self) -> float:
        """Return the number; integers are widened to float."""
        if self.type not in (ValueType.DOUBLE, ValueType.INTEGER):
            raise self._wrong_type("a number")
        return float(self._value)

    def deep_copy(self) -> FundamentalValue:
        return FundamentalValue(self._value)

    def equals(self, other: Value) -> bool:
        if other.type is not self.type:
            return False
        if self.type is ValueType.BOOLEAN:
            return self.as_bool() == other.as_bool()
        if self.type is ValueType.INTEGER:
            return self.as_int() == other.as_int()
        return self.as_float() == other.as_float()

    def __repr__(self) -> str:
        return f"FundamentalValue({self._value!r})"


class StringValue(Value):
    """A text value."""

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"string value expected, got {type(value).__name__}")
        super().__init__(ValueType.STRING)
        self._value = value

    def as_str(self) -> str:
        return self._value

    def deep_copy(self) -> StringValue:
        return StringValue(self._value)

    def equals(self, other: Value) -> bool:
        if other.type is not self.type:
            return False
        return self._value == other.as_str()

    def __repr__(self) -> str:
        return f"StringValue({self._value!r})"


def _check_value(value: object) -> Value:
    if not isinstance(value, Value):
        raise TypeError(f"Value expected, got {type(value).__name__}")
    return value


class ListValue(Value):
    """An ordered list of values."""

    def __init__(self, values: Iterable[Value] = ()) -> None:
        super().__init__(ValueType.LIST)
        self._items: list[Value] = [_check_value(v) for v in values]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._items)

    def clear(self) -> None:
        self._items.clear()

    def set(self, index: int, value: Value) -> None:
        """Store ``value`` at ``index``, padding with nulls past the end."""
        _check_value(value)
        if index < 0:
            raise IndexError(f"negative list index: {index}")
        if index >= len(self._items):
            while index > len(self._items):
                self._items.append(Value.create_null())
            self._items.append(value)
        else:
            self._items[index] = value

    def get(self, index: int) -> Value:
        """Return the value at ``index``; raises IndexError if out of range."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"list index out of range: {index}")
        return self._items[index]

    def get_bool(self, index: int) -> bool:
        return self.get(index).as_bool()

    def get_int(self, index: int) -> int:
        return self.get(index).as_int()

    def get_float(self, index: int) -> float:
        return self.get(index).as_float()

    def get_str(self, index: int) -> str:
        return self.get(index).as_str()

    def get_list(self, index: int) -> ListValue:
        return self.get(index).as_list()

    def get_dictionary(self, index: int) -> DictionaryValue:
        return self.get(index).as_dictionary()

    def remove(self, index: int) -> Value:
        """Remove and return the value at ``index``."""
        self.get(index)
        return self._items.pop(index)

    def remove_value(self, value: Value) -> int:
        """Remove the first equal value and return where it was.

        Raises ValueError if no equal value is present.
        """
        found = self.find(value)
        if found is None:
            raise ValueError(f"value not in list: {value!r}")
        del self._items[found]
        return found

    def append(self, value: Value) -> None:
        self._items.append(_check_value(value))

    def append_bool(self, value: bool) -> None:
        self.append(FundamentalValue(bool(value)))

    def append_int(self, value: int) -> None:
        self.append(FundamentalValue(int(value)))

    def append_float(self, value: float) -> None:
        self.append(FundamentalValue(float(value)))

    def append_str(self, value: str) -> None:
        self.append(StringValue(value))

    def append_strings(self, values: Iterable[str]) -> None:
        for text in values:
            self.append_str(text)

    def append_if_not_present(self, value: Value) -> bool:
        """Append unless an equal value is present; return whether it was added."""
        _check_value(value)
        if self.find(value) is not None:
            return False
        self._items.append(value)
        return True

    def insert(self, index: int, value: Value) -> None:
        """Insert before ``index``; raises IndexError past the end."""
        _check_value(value)
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index out of range: {index}")
        self._items.insert(index, value)

    def find(self, value: Value) -> int | None:
        """Return the index of the first equal value, or None."""
        return next((i for i, item in enumerate(self._items) if item.equals(value)), None)

    def swap(self, other: ListValue) -> None:
        """Exchange contents with another list."""
        self._items, other._items = other._items, self._items

    def as_list(self) -> ListValue:
        return self

    def deep_copy(self) -> ListValue:
        return ListValue(item.deep_copy() for item in self._items)

    def equals(self, other: Value) -> bool:
        if other.type is not self.type:
            return False
        theirs = other.as_list()
        return len(self) == len(theirs) and all(
            mine.equals(their) for mine, their in zip(self._items, theirs)
        )

    def __repr__(self) -> str:
        return f"ListValue({self._items!r})"