"""Value classification.

Every node visited by the walker is classified once into a ``ValueKind``.
The kind decides which comparison strategy applies when no override rule
intercepts the node.
"""

from __future__ import annotations

import array
import datetime
import enum
import numbers
import pathlib
import re
import uuid
from collections.abc import Collection, Mapping, Sequence
from decimal import Decimal
from enum import StrEnum
from typing import Any

# Types compared as a whole rather than walked
VALUE_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    memoryview,
    bool,
    numbers.Number,
    Decimal,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    enum.Enum,
    uuid.UUID,
    pathlib.PurePath,
    re.Pattern,
    range,
    type,
)


class ValueKind(StrEnum):
    """Comparison category of a value."""

    NULL = "null"
    VALUE = "value"
    ARRAY = "array"
    MAP = "map"
    LIST = "list"
    COLLECTION = "collection"
    COMPOSITE = "composite"

    @property
    def is_container(self) -> bool:
        """True for kinds whose comparison starts with a size check."""
        return self in (ValueKind.ARRAY, ValueKind.MAP, ValueKind.LIST, ValueKind.COLLECTION)


def is_named_tuple(value: Any) -> bool:
    """Check if the value is an instance of a named tuple."""
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def classify(value: Any) -> ValueKind:
    """Determine the comparison category of a value.

    Args:
        value: Any runtime value.

    Returns:
        ValueKind for the value. Tuples and ``array.array`` are positional
        arrays, other sequences are order-insensitive lists, sets and other
        sized collections are unordered collections, named tuples and anything
        without a more specific kind are composites.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, VALUE_TYPES):
        return ValueKind.VALUE
    if isinstance(value, Mapping):
        return ValueKind.MAP
    if is_named_tuple(value):
        return ValueKind.COMPOSITE
    if isinstance(value, (tuple, array.array)):
        return ValueKind.ARRAY
    if isinstance(value, Sequence):
        return ValueKind.LIST
    if isinstance(value, Collection):
        return ValueKind.COLLECTION
    return ValueKind.COMPOSITE


__all__ = [
    "VALUE_TYPES",
    "ValueKind",
    "classify",
    "is_named_tuple",
]
