"""Ordering used to normalize collections before element-wise comparison.

Collections are compared as content, not by position: both sides are sorted
and then compared index by index. Natural ordering is used when the elements
support it; otherwise a ``StructuralOrdering`` compares elements property by
property. The structural order is deterministic but carries no meaning beyond
lining up equivalent elements.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from decimal import Decimal
from functools import cmp_to_key
from typing import Any, Protocol

from .classifier import ValueKind, classify
from .introspection import MISSING, PropertyEnumerator, default_enumerator, read_property

_KIND_RANK = {kind: rank for rank, kind in enumerate(ValueKind)}


def _sign(lhs: Any, rhs: Any) -> int:
    return (lhs > rhs) - (lhs < rhs)


def is_nan(value: Any) -> bool:
    """Check if the value is a float or Decimal NaN."""
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


class OrderingStrategy(Protocol):
    """Three-way comparison used when elements have no natural ordering."""

    def compare(self, lhs: Any, rhs: Any) -> int:
        """Return a negative, zero or positive number as lhs orders before, with or after rhs."""
        ...


class StructuralOrdering:
    """Orders arbitrary values by kind, type name, then content.

    Values are compared naturally when possible, containers by size then
    element by element, composites property by property in enumeration order.
    Re-entering a pair already being compared (a cycle) counts as equal.

    Args:
        enumerator: Property enumerator used for composite values.
    """

    def __init__(self, enumerator: PropertyEnumerator | None = None) -> None:
        self.enumerator = enumerator or default_enumerator
        self._active: set[tuple[int, int]] = set()

    def compare(self, lhs: Any, rhs: Any) -> int:
        if lhs is rhs:
            return 0
        if lhs is MISSING or rhs is MISSING:
            # Absent attributes order first
            return _sign(lhs is not MISSING, rhs is not MISSING)
        lhs_kind, rhs_kind = classify(lhs), classify(rhs)
        if lhs_kind is not rhs_kind:
            return _sign(_KIND_RANK[lhs_kind], _KIND_RANK[rhs_kind])
        if lhs_kind is ValueKind.NULL:
            return 0

        lhs_type, rhs_type = type(lhs).__qualname__, type(rhs).__qualname__
        if lhs_kind is ValueKind.VALUE:
            return self._compare_values(lhs, rhs, lhs_type, rhs_type)
        if lhs_type != rhs_type:
            return _sign(lhs_type, rhs_type)

        key = (id(lhs), id(rhs))
        if key in self._active:
            return 0
        self._active.add(key)
        try:
            return self._compare_structures(lhs, rhs, lhs_kind)
        finally:
            self._active.discard(key)

    def _compare_values(self, lhs: Any, rhs: Any, lhs_type: str, rhs_type: str) -> int:
        lhs_nan, rhs_nan = is_nan(lhs), is_nan(rhs)
        if lhs_nan or rhs_nan:
            # NaN orders after every other value
            return _sign(lhs_nan, rhs_nan)
        try:
            return _sign(lhs, rhs)
        except TypeError:
            pass
        if lhs_type != rhs_type:
            return _sign(lhs_type, rhs_type)
        return _sign(repr(lhs), repr(rhs))

    def _compare_structures(self, lhs: Any, rhs: Any, kind: ValueKind) -> int:
        if kind is ValueKind.MAP:
            result = _sign(len(lhs), len(rhs))
            if result:
                return result
            lhs_keys, rhs_keys = self.sorted(lhs.keys()), self.sorted(rhs.keys())
            result = self._compare_items(lhs_keys, rhs_keys)
            if result:
                return result
            return self._compare_items([lhs[key] for key in lhs_keys], [rhs[key] for key in rhs_keys])

        if kind is ValueKind.COMPOSITE:
            accessors = self.enumerator.properties_of_both(lhs, rhs)
            return self._compare_items(
                (read_property(accessor, lhs) for accessor in accessors),
                (read_property(accessor, rhs) for accessor in accessors),
            )

        result = _sign(len(lhs), len(rhs))
        if result:
            return result
        if kind is ValueKind.COLLECTION:
            return self._compare_items(self.sorted(lhs), self.sorted(rhs))
        return self._compare_items(lhs, rhs)

    def _compare_items(self, lhs_items: Iterable[Any], rhs_items: Iterable[Any]) -> int:
        for lhs_item, rhs_item in zip(lhs_items, rhs_items, strict=False):
            result = self.compare(lhs_item, rhs_item)
            if result:
                return result
        return 0

    def sorted(self, items: Iterable[Any]) -> list[Any]:
        """Sort items with this ordering."""
        return sorted(items, key=cmp_to_key(self.compare))


def sort_elements(items: Iterable[Any], fallback: OrderingStrategy) -> list[Any]:
    """Copy and sort items, naturally if the elements allow it.

    Sets and mappings never use natural ordering: ``<`` on sets is the subset
    relation, which is not a total order. Neither does a sequence holding NaN,
    which compares false against everything.

    Args:
        items: Elements to sort.
        fallback: Ordering used when natural ordering is unavailable.

    Returns:
        A new sorted list.
    """
    elements = list(items)
    key: Callable[[Any], Any] = cmp_to_key(fallback.compare)
    if any(classify(element) in (ValueKind.COLLECTION, ValueKind.MAP) or is_nan(element) for element in elements):
        return sorted(elements, key=key)
    try:
        return sorted(elements)
    except TypeError:
        return sorted(elements, key=key)


__all__ = [
    "OrderingStrategy",
    "StructuralOrdering",
    "is_nan",
    "sort_elements",
]
