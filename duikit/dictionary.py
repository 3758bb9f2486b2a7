"""Dictionaries of values, addressed by plain keys or by dotted paths."""

from __future__ import annotations

from collections.abc import Iterator

from duikit.value import FundamentalValue, ListValue, StringValue, Value, ValueType


def _require_value(value: object) -> Value:
    if not isinstance(value, Value):
        raise TypeError(f"Value expected, got {type(value).__name__}")
    return value


def copy_without_empty_children(value: Value) -> Value | None:
    """Deep-copy ``value``, dropping empty lists and dictionaries at every level.

    Returns None when ``value`` is a list or dictionary that ends up empty.
    """
    if value.is_type(ValueType.LIST):
        copy = ListValue()
        for item in value.as_list():
            child = copy_without_empty_children(item)
            if child is not None:
                copy.append(child)
        return copy if len(copy) else None

    if value.is_type(ValueType.DICTIONARY):
        copy_dict = DictionaryValue()
        for key, item in value.as_dictionary().items():
            child = copy_without_empty_children(item)
            if child is not None:
                copy_dict.set_without_path_expansion(key, child)
        return copy_dict if len(copy_dict) else None

    return value.deep_copy()


class DictionaryValue(Value):
    """A mapping from string keys to values, kept in key order.

    Methods taking a ``path`` treat ``"."`` as a separator between keys of
    nested dictionaries; the ``*_without_path_expansion`` forms do not.
    Lookups of missing keys raise KeyError; values of the wrong kind raise
    TypeError.
    """

    def __init__(self) -> None:
        super().__init__(ValueType.DICTIONARY)
        self._entries: dict[str, Value] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def as_dictionary(self) -> DictionaryValue:
        return self

    def has_key(self, key: str) -> bool:
        """True if ``key`` is present at this level (no path expansion)."""
        return key in self._entries

    def clear(self) -> None:
        self._entries.clear()

    def set(self, path: str, value: Value) -> None:
        """Store ``value`` at ``path``, creating or replacing intermediate dictionaries."""
        _require_value(value)
        *parents, last = path.split(".")
        current = self
        for key in parents:
            child = current._entries.get(key)
            if child is None or not child.is_type(ValueType.DICTIONARY):
                child = DictionaryValue()
                current.set_without_path_expansion(key, child)
            current = child.as_dictionary()
        current.set_without_path_expansion(last, value)

    def set_bool(self, path: str, value: bool) -> None:
        self.set(path, FundamentalValue(bool(value)))

    def set_int(self, path: str, value: int) -> None:
        self.set(path, FundamentalValue(int(value)))

    def set_float(self, path: str, value: float) -> None:
        self.set(path, FundamentalValue(float(value)))

    def set_str(self, path: str, value: str) -> None:
        self.set(path, StringValue(value))

    def set_without_path_expansion(self, key: str, value: Value) -> None:
        """Store ``value`` under ``key`` exactly, dots included."""
        self._entries[key] = _require_value(value)

    def _parent_of(self, path: str) -> tuple[DictionaryValue, str]:
        *parents, last = path.split(".")
        current = self
        for key in parents:
            child = current._entries.get(key)
            if child is None or not child.is_type(ValueType.DICTIONARY):
                raise KeyError(path)
            current = child.as_dictionary()
        return current, last

    def get(self, path: str) -> Value:
        """Return the value at ``path``; raises KeyError if it cannot be resolved."""
        parent, key = self._parent_of(path)
        try:
            return parent._entries[key]
        except KeyError:
            raise KeyError(path) from None

    def get_bool(self, path: str) -> bool:
        return self.get(path).as_bool()

    def get_int(self, path: str) -> int:
        return self.get(path).as_int()

    def get_float(self, path: str) -> float:
        return self.get(path).as_float()

    def get_str(self, path: str) -> str:
        return self.get(path).as_str()

    def get_dictionary(self, path: str) -> DictionaryValue:
        return self.get(path).as_dictionary()

    def get_list(self, path: str) -> ListValue:
        return self.get(path).as_list()

    def get_without_path_expansion(self, key: str) -> Value:
        """Return the value stored under ``key`` exactly; raises KeyError."""
        return self._entries[key]

    def remove(self, path: str) -> Value:
        """Remove and return the value at ``path``; raises KeyError if absent."""
        head, sep, last = path.rpartition(".")
        parent = self.get_dictionary(head) if sep else self
        try:
            return parent.remove_without_path_expansion(last)
        except KeyError:
            raise KeyError(path) from None

    def remove_without_path_expansion(self, key: str) -> Value:
        """Remove and return the value stored under ``key`` exactly."""
        return self._entries.pop(key)

    def deep_copy_without_empty_children(self) -> DictionaryValue:
        """Deep copy without empty lists or dictionaries; never returns None."""
        copy = copy_without_empty_children(self)
        return copy.as_dictionary() if copy is not None else DictionaryValue()

    def merge_dictionary(self, other: DictionaryValue) -> None:
        """Merge ``other`` in recursively; its values win on key collisions."""
        for key, value in other.items():
            if value.is_type(ValueType.DICTIONARY):
                mine = self._entries.get(key)
                if mine is not None and mine.is_type(ValueType.DICTIONARY):
                    mine.as_dictionary().merge_dictionary(value.as_dictionary())
                    continue
            self.set_without_path_expansion(key, value.deep_copy())

    def swap(self, other: DictionaryValue) -> None:
        """Exchange contents with another dictionary."""
        self._entries, other._entries = other._entries, self._entries

    def items(self) -> Iterator[tuple[str, Value]]:
        """Yield ``(key, value)`` pairs in key order."""
        for key in sorted(self._entries):
            yield key, self._entries[key]

    def deep_copy(self) -> DictionaryValue:
        copy = DictionaryValue()
        for key, value in self.items():
            copy.set_without_path_expansion(key, value.deep_copy())
        return copy

    def equals(self, other: Value) -> bool:
        if other.type is not self.type:
            return False
        theirs = other.as_dictionary()
        if len(self) != len(theirs):
            return False
        return all(
            k1 == k2 and v1.equals(v2)
            for (k1, v1), (k2, v2) in zip(self.items(), theirs.items())
        )

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"DictionaryValue({{{inner}}})"