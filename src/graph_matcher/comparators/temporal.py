"""Date and time comparison rules truncating to a granularity."""

from __future__ import annotations

import datetime
from typing import Any

from graph_matcher.core.exceptions import RuleConfigurationError


def _require_temporal(value: Any) -> datetime.date:
    if not isinstance(value, datetime.date):
        raise RuleConfigurationError(
            f"Date comparison requires date or datetime values, got {type(value).__qualname__}"
        )
    return value


class _TruncatedEquality:
    """Base for rules comparing two dates after truncating both."""

    def truncate(self, value: datetime.date) -> datetime.date:
        raise NotImplementedError

    def matches(self, lhs: Any, rhs: Any) -> bool:
        if lhs is None or rhs is None:
            return lhs is rhs
        return self.truncate(_require_temporal(lhs)) == self.truncate(_require_temporal(rhs))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IsEqualDate(_TruncatedEquality):
    """Equivalent when both values fall on the same calendar date; the time of day is ignored."""

    def truncate(self, value: datetime.date) -> datetime.date:
        if isinstance(value, datetime.datetime):
            return value.date()
        return value


class IsEqualDateTime(_TruncatedEquality):
    """Equivalent when date and time agree to the second; sub-second precision is ignored."""

    def truncate(self, value: datetime.date) -> datetime.date:
        if isinstance(value, datetime.datetime):
            return value.replace(microsecond=0)
        return value


class IsEqualTimestamp(_TruncatedEquality):
    """Equivalent when date and time agree to the millisecond."""

    def truncate(self, value: datetime.date) -> datetime.date:
        if isinstance(value, datetime.datetime):
            return value.replace(microsecond=value.microsecond // 1000 * 1000)
        return value


__all__ = [
    "IsEqualDate",
    "IsEqualDateTime",
    "IsEqualTimestamp",
]
