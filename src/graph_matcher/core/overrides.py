"""Override registry: comparison rules bound to paths, property names and types."""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any

from graph_matcher.comparators.base import ComparisonRule
from graph_matcher.comparators.equality import Excluded, IsComparable, IsEqual

from . import paths


def default_type_rules() -> dict[type, ComparisonRule]:
    """Type rules every new engine starts with."""
    return {
        Decimal: IsComparable(),
        str: IsEqual(),
        int: IsEqual(),
        float: IsEqual(),
        complex: IsEqual(),
        datetime.datetime: IsComparable(),
        datetime.date: IsComparable(),
        datetime.time: IsComparable(),
        type: Excluded(),
    }


class OverrideRegistry:
    """Comparison rules keyed by path, property name and runtime type.

    Lookups follow a fixed precedence and the first match wins:

    1. Path, compared case-insensitively with index brackets stripped
       (``Tree.Branches[0].Dead`` is looked up as ``tree.branches.dead``).
    2. Property name, the trailing segment of that path.
    3. Type: the first registered type found walking the value type's MRO,
       so the most specific registration wins. Registered types that are only
       virtual base classes (ABC registration) are tried afterwards, most
       derived first, then in registration order.
    """

    def __init__(self, type_rules: dict[type, ComparisonRule] | None = None) -> None:
        self._paths: dict[str, ComparisonRule] = {}
        self._properties: dict[str, ComparisonRule] = {}
        self._types: dict[type, ComparisonRule] = dict(type_rules or {})

    def add_path(self, path: str, rule: ComparisonRule) -> None:
        self._paths[paths.normalize(path)] = rule

    def add_property(self, name: str, rule: ComparisonRule) -> None:
        self._properties[name.lower()] = rule

    def add_type(self, type_: type, rule: ComparisonRule) -> None:
        if not isinstance(type_, type):
            raise TypeError(f"Expected a type, got {type_!r}")
        self._types[type_] = rule

    def for_path(self, path: str) -> ComparisonRule | None:
        return self._paths.get(paths.normalize(path))

    def for_property(self, path: str) -> ComparisonRule | None:
        return self._properties.get(paths.property_name(path))

    def for_type(self, value_type: type) -> ComparisonRule | None:
        for klass in value_type.__mro__:
            rule = self._types.get(klass)
            if rule is not None:
                return rule

        virtual = [
            (position, registered)
            for position, registered in enumerate(self._types)
            if registered not in value_type.__mro__ and issubclass(value_type, registered)
        ]
        if not virtual:
            return None
        _, best = min(virtual, key=lambda item: (-len(item[1].__mro__), item[0]))
        return self._types[best]

    def resolve(self, path: str, value_type: type) -> tuple[str, ComparisonRule] | None:
        """Find the rule governing a node.

        Args:
            path: Traversal path of the node.
            value_type: Runtime type of the node (of the non-null side).

        Returns:
            ``(scope, rule)`` where scope is "path", "property" or "type",
            or None when the node is compared structurally.
        """
        rule = self.for_path(path)
        if rule is not None:
            return "path", rule
        rule = self.for_property(path)
        if rule is not None:
            return "property", rule
        rule = self.for_type(value_type)
        if rule is not None:
            return "type", rule
        return None

    def describe(self) -> dict[str, Any]:
        """Registered rules, for logging and debugging."""
        return {
            "paths": dict(self._paths),
            "properties": dict(self._properties),
            "types": {klass.__qualname__: rule for klass, rule in self._types.items()},
        }


__all__ = [
    "OverrideRegistry",
    "default_type_rules",
]
