"""Comparison rules for use with ``TheSameAs``.

Each factory returns a ``ComparisonRule`` that can be bound to a path, a
property name or a type:

    >>> the_same_as(expected).compare_property("name", is_equal_ignore_case())
    >>> the_same_as(expected).compare_type(datetime, is_equal_date())
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from .base import ComparisonRule, Matches, Satisfies, as_rule
from .equality import Excluded, HasPattern, IsComparable, IsEqual, IsEqualIgnoreCase
from .temporal import IsEqualDate, IsEqualDateTime, IsEqualTimestamp


def exclude() -> ComparisonRule:
    """Exclude the property, type, or path from comparison."""
    return Excluded()


def matches(predicate: Callable[[Any], bool]) -> ComparisonRule:
    """Match the property, type, or path when the predicate holds for both values."""
    return Matches(predicate)


def satisfies(function: Callable[[Any, Any], bool]) -> ComparisonRule:
    """Match the property, type, or path using a function of (expected, actual)."""
    return Satisfies(function)


def has_pattern(pattern: str | re.Pattern[str]) -> ComparisonRule:
    """Match the text property, type, or path against a regular expression."""
    return HasPattern(pattern)


def is_comparable() -> ComparisonRule:
    """Match the property, type, or path using their ordering operators."""
    return IsComparable()


def is_equal() -> ComparisonRule:
    """Match the property, type, or path using ``==``."""
    return IsEqual()


def is_equal_ignore_case() -> ComparisonRule:
    """Match the text property, type, or path regardless of case."""
    return IsEqualIgnoreCase()


def is_equal_date_time() -> ComparisonRule:
    """Match the datetime property, type, or path by date and time, ignoring sub-second precision."""
    return IsEqualDateTime()


def is_equal_date() -> ComparisonRule:
    """Match the datetime property, type, or path by calendar date only."""
    return IsEqualDate()


def is_equal_timestamp() -> ComparisonRule:
    """Match the datetime property, type, or path down to the millisecond."""
    return IsEqualTimestamp()


__all__ = [
    "ComparisonRule",
    "Excluded",
    "HasPattern",
    "IsComparable",
    "IsEqual",
    "IsEqualDate",
    "IsEqualDateTime",
    "IsEqualIgnoreCase",
    "IsEqualTimestamp",
    "Matches",
    "Satisfies",
    "as_rule",
    "exclude",
    "has_pattern",
    "is_comparable",
    "is_equal",
    "is_equal_date",
    "is_equal_date_time",
    "is_equal_ignore_case",
    "is_equal_timestamp",
    "matches",
    "satisfies",
]
