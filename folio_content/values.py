"""Immutable value tree produced by the content parser.

A parsed document is a tree of :class:`MappingValue`, :class:`SequenceValue`
and the scalar types :class:`StringValue`, :class:`BooleanValue`,
:class:`IntegerValue` and :class:`FloatValue`. Consumers are expected to
``match`` on these classes rather than inspect the shape of plain containers;
:func:`to_python` is provided for collaborators that want ``dict``/``list``
data instead.

Examples
--------
>>> from folio_content.values import MappingValue, IntegerValue, to_python
>>> tree = MappingValue((("age", IntegerValue(30)),))
>>> tree["age"]
IntegerValue(value=30)
>>> to_python(tree)
{'age': 30}
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class StringValue:
    """Text scalar."""

    value: str


@dc.dataclass(frozen=True, slots=True)
class BooleanValue:
    """``true`` or ``false`` scalar."""

    value: bool


@dc.dataclass(frozen=True, slots=True)
class IntegerValue:
    """Whole-number scalar."""

    value: int


@dc.dataclass(frozen=True, slots=True)
class FloatValue:
    """Decimal scalar."""

    value: float


@dc.dataclass(frozen=True, slots=True)
class SequenceValue:
    """Ordered list of values, authored as block items or an inline array."""

    items: tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> cabc.Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


@dc.dataclass(frozen=True, slots=True)
class MappingValue:
    """Ordered key/value pairs with unique keys.

    Attributes
    ----------
    entries : tuple[tuple[str, Value], ...]
        Pairs in authoring order. Equality compares entries in order, so two
        mappings with the same pairs in a different order are not equal.
    """

    entries: tuple[tuple[str, Value], ...] = ()
    _index: dict[str, Value] = dc.field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index: dict[str, Value] = {}
        for key, value in self.entries:
            if key in index:
                msg = f"Duplicate mapping key '{key}'."
                raise ValueError(msg)
            index[key] = value
        object.__setattr__(self, "_index", index)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> cabc.Iterator[str]:
        return (key for key, _ in self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: str) -> Value:
        return self._index[key]

    def get(self, key: str, default: Value | None = None) -> Value | None:
        """Return the value stored under ``key`` or ``default``."""
        return self._index.get(key, default)

    def keys(self) -> list[str]:
        """Return the keys in authoring order."""
        return [key for key, _ in self.entries]

    def values(self) -> list[Value]:
        """Return the values in authoring order."""
        return [value for _, value in self.entries]

    def items(self) -> list[tuple[str, Value]]:
        """Return ``(key, value)`` pairs in authoring order."""
        return list(self.entries)


ScalarValue: typ.TypeAlias = StringValue | BooleanValue | IntegerValue | FloatValue
Value: typ.TypeAlias = MappingValue | SequenceValue | ScalarValue

PlainValue: typ.TypeAlias = (
    "dict[str, PlainValue] | list[PlainValue] | str | bool | int | float"
)


def to_python(value: Value) -> PlainValue:
    """Project a value tree onto plain ``dict``/``list``/scalar objects.

    Mapping order is preserved in the returned dictionaries.
    """
    match value:
        case MappingValue():
            return {key: to_python(child) for key, child in value.entries}
        case SequenceValue():
            return [to_python(child) for child in value.items]
        case StringValue() | BooleanValue() | IntegerValue() | FloatValue():
            return value.value
        case _:
            msg = f"Unsupported value type: {type(value).__name__}"
            raise TypeError(msg)


__all__ = [
    "BooleanValue",
    "FloatValue",
    "IntegerValue",
    "MappingValue",
    "PlainValue",
    "ScalarValue",
    "SequenceValue",
    "StringValue",
    "Value",
    "to_python",
]
