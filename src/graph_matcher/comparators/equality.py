"""Equality based comparison rules."""

from __future__ import annotations

import math
import re
from typing import Any

from graph_matcher.core.exceptions import RuleConfigurationError


def _both_nan(lhs: Any, rhs: Any) -> bool:
    return isinstance(lhs, float) and isinstance(rhs, float) and math.isnan(lhs) and math.isnan(rhs)


def supports_ordering(value: Any) -> bool:
    """Check if the value's type defines its own ``<`` operator."""
    return getattr(type(value), "__lt__", object.__lt__) is not object.__lt__


class IsEqual:
    """Values are equivalent when ``==`` says so. NaN is equal to NaN."""

    def matches(self, lhs: Any, rhs: Any) -> bool:
        if lhs is None or rhs is None:
            return lhs is rhs
        return bool(lhs == rhs) or _both_nan(lhs, rhs)

    def __repr__(self) -> str:
        return "IsEqual()"


class IsComparable:
    """Values are equivalent when neither orders before the other.

    ``Decimal("1.0")`` and ``Decimal("1.00")`` are equivalent, as are two aware
    datetimes denoting the same instant in different time zones.
    """

    def matches(self, lhs: Any, rhs: Any) -> bool:
        if lhs is None or rhs is None:
            return lhs is rhs
        for value in (lhs, rhs):
            if not supports_ordering(value):
                raise RuleConfigurationError(f"Type {type(value).__qualname__} does not support ordering")
        try:
            return not (lhs < rhs) and not (rhs < lhs)
        except TypeError:
            # Ordering is not defined across these two types
            return False

    def __repr__(self) -> str:
        return "IsComparable()"


class IsEqualIgnoreCase:
    """Text values are equivalent regardless of case."""

    def matches(self, lhs: Any, rhs: Any) -> bool:
        if lhs is None or rhs is None:
            return lhs is rhs
        if not isinstance(lhs, str) or not isinstance(rhs, str):
            raise RuleConfigurationError(
                f"Case-insensitive comparison requires text, got {type(lhs).__qualname__} "
                f"and {type(rhs).__qualname__}"
            )
        return lhs.casefold() == rhs.casefold()

    def __repr__(self) -> str:
        return "IsEqualIgnoreCase()"


class HasPattern:
    """The actual value is text fully matching a regular expression.

    The expected value is only consulted for ``None``: a missing expected
    value requires a missing actual value. A non-text actual value is a
    misconfiguration.
    """

    def __init__(self, pattern: str | re.Pattern[str]):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def matches(self, lhs: Any, rhs: Any) -> bool:
        if lhs is None or rhs is None:
            return lhs is rhs
        if not isinstance(rhs, str):
            raise RuleConfigurationError(f"Pattern comparison requires text, got {type(rhs).__qualname__}")
        return self.pattern.fullmatch(rhs) is not None

    def __repr__(self) -> str:
        return f"HasPattern({self.pattern.pattern!r})"


class Excluded:
    """Always equivalent. Used to leave a path, property or type out of the comparison."""

    def matches(self, lhs: Any, rhs: Any) -> bool:
        return True

    def __repr__(self) -> str:
        return "Excluded()"


__all__ = [
    "Excluded",
    "HasPattern",
    "IsComparable",
    "IsEqual",
    "IsEqualIgnoreCase",
    "supports_ordering",
]
