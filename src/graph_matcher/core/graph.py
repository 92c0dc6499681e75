"""Navigation of a single object graph by property name or path."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any

from .classifier import ValueKind, classify
from .introspection import PropertyEnumerator, default_enumerator, read_property

_SEGMENT_PATTERN = re.compile(r"([^.\[\]]+)|\[([^\]]*)\]")


class _NotFound:
    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Any = _NotFound()


def parse_path(path: str) -> list[tuple[str, bool]]:
    """Split a path into ``(segment, is_index)`` pairs.

    Example:
        >>> parse_path("Tree.branches[0].dead")
        [('Tree', False), ('branches', False), ('0', True), ('dead', False)]
    """
    segments = []
    for match in _SEGMENT_PATTERN.finditer(path):
        name, index = match.groups()
        if name is not None:
            segments.append((name, False))
        else:
            segments.append((index, True))
    return segments


class GraphNavigator:
    """Looks up values inside an object graph.

    Args:
        enumerator: Property enumerator for composite objects.
    """

    def __init__(self, enumerator: PropertyEnumerator | None = None) -> None:
        self.enumerator = enumerator or default_enumerator

    def _read(self, obj: Any, name: str) -> Any:
        for accessor in self.enumerator.properties_of(obj):
            if accessor.name.lower() == name.lower():
                return read_property(accessor, obj)
        return NOT_FOUND

    @staticmethod
    def _lookup_key(mapping: Mapping[Any, Any], key: str) -> Any:
        if key in mapping:
            return mapping[key]
        for candidate, value in mapping.items():
            if str(candidate).lower() == key.lower():
                return value
        return NOT_FOUND

    def _step(self, value: Any, segment: str, is_index: bool) -> Any:
        kind = classify(value)
        if kind is ValueKind.MAP:
            return self._lookup_key(value, segment)
        if is_index:
            if kind not in (ValueKind.LIST, ValueKind.ARRAY):
                return NOT_FOUND
            try:
                return value[int(segment)]
            except (ValueError, IndexError):
                return NOT_FOUND
        if kind is ValueKind.COMPOSITE:
            return self._read(value, segment)
        return NOT_FOUND

    def find_path(self, root: Any, path: str) -> Any:
        """Resolve a dotted path such as ``Tree.main_branch.leaves[0]``.

        Property names are matched case-insensitively. The first segment may
        name the root by its simple type name, in which case it is skipped.

        Returns:
            The value at the path, or ``NOT_FOUND``.
        """
        segments = parse_path(path)
        if segments and not segments[0][1] and segments[0][0].lower() == type(root).__name__.lower():
            segments = segments[1:]

        value = root
        for segment, is_index in segments:
            value = self._step(value, segment, is_index)
            if value is NOT_FOUND:
                return NOT_FOUND
        return value

    def iter_properties(self, root: Any) -> Iterator[tuple[str, Any]]:
        """Yield ``(name, value)`` for every property in the graph, depth first.

        Each composite and container is visited once, so cyclic graphs terminate.
        """
        visited: dict[int, Any] = {}
        stack: list[Any] = [root]
        while stack:
            node = stack.pop()
            kind = classify(node)
            if kind in (ValueKind.NULL, ValueKind.VALUE) or id(node) in visited:
                continue
            visited[id(node)] = node

            if kind is ValueKind.COMPOSITE:
                children = []
                for accessor in self.enumerator.properties_of(node):
                    value = read_property(accessor, node)
                    yield accessor.name, value
                    children.append(value)
            elif kind is ValueKind.MAP:
                children = list(node.values())
            else:
                children = list(node)
            stack.extend(reversed(children))

    def find_property(self, root: Any, name: str) -> Any:
        """Find the first property with this name anywhere in the graph.

        Returns:
            The property's value, or ``NOT_FOUND``.
        """
        for property_name, value in self.iter_properties(root):
            if property_name.lower() == name.lower():
                return value
        return NOT_FOUND


__all__ = [
    "NOT_FOUND",
    "GraphNavigator",
    "parse_path",
]
