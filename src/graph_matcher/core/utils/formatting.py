"""Rendering of arbitrary values for mismatch descriptions."""

from __future__ import annotations

import reprlib
from typing import Any


def _make_repr(max_length: int) -> reprlib.Repr:
    value_repr = reprlib.Repr()
    value_repr.maxstring = max_length
    value_repr.maxother = max_length
    value_repr.maxlong = max_length
    value_repr.maxlevel = 3
    return value_repr


def describe_value(value: Any, *, max_length: int = 80) -> str:
    """Render a value for a diagnostic line.

    Strings are double-quoted, everything else uses its repr, truncated with
    '...' when longer than ``max_length``.
    """
    if isinstance(value, str):
        text = value if len(value) <= max_length else value[: max_length - 3] + "..."
        return f'"{text}"'
    return _make_repr(max_length).repr(value)


__all__ = ["describe_value"]
