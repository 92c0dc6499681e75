"""Traversal path construction and normalization.

Paths are plain strings such as ``Tree.branches[0].leaves[1].colour``. Index
and key brackets make a path unique within the expected graph; they are
stripped when a path is used to look up an override.
"""

from __future__ import annotations

import re
from typing import Any

SEPARATOR = "."
SIZE_SEGMENT = "size"

_BRACKETS_PATTERN = re.compile(r"\[[^\]]*\]")


def child(path: str, name: str) -> str:
    """Path of a named property below ``path``."""
    return f"{path}{SEPARATOR}{name}" if path else name


def element(path: str, key: Any) -> str:
    """Path of an element or map entry below ``path``."""
    return f"{path}[{key}]"


def size(path: str) -> str:
    """Path used to report a size difference of the container at ``path``."""
    return child(path, SIZE_SEGMENT)


def normalize(path: str) -> str:
    """Strip index brackets and lower-case the path for override lookups.

    Example:
        >>> normalize("Tree.Branches[0].Leaves[12].Colour")
        'tree.branches.leaves.colour'
    """
    return _BRACKETS_PATTERN.sub("", path).lower()


def property_name(path: str) -> str:
    """Trailing segment of a normalized path.

    Example:
        >>> property_name("Tree.Branches[0].Dead")
        'dead'
    """
    return normalize(path).rpartition(SEPARATOR)[2]


__all__ = [
    "SEPARATOR",
    "SIZE_SEGMENT",
    "child",
    "element",
    "normalize",
    "property_name",
    "size",
]
