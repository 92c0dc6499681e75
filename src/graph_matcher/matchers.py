"""Matchers for use in test assertions.

Example:
    >>> assert_that(dao.get_by_id(tree.id), the_same_as(tree).exclude_property("id"))
    >>> assert_that(tree, has_path("Tree.main_branch.dead", lambda dead: dead is False))
    >>> assert_that(tree, has_property("name", the_same_as("Oak")))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from graph_matcher.core.engine import TheSameAs, the_same_as
from graph_matcher.core.graph import NOT_FOUND, GraphNavigator

ValueCheck = Callable[[Any], bool]


@runtime_checkable
class Matcher(Protocol):
    """Anything that can test a value and describe itself and a failure."""

    def matches(self, actual: Any) -> bool: ...

    def describe(self) -> str: ...

    def describe_mismatch(self, actual: Any) -> str: ...


def _check(check: ValueCheck | Matcher, value: Any) -> bool:
    if isinstance(check, Matcher):
        return check.matches(value)
    return bool(check(value))


def _describe(check: ValueCheck | Matcher) -> str:
    if isinstance(check, Matcher):
        return check.describe()
    return getattr(check, "__name__", repr(check))


class _GraphLookupMatcher:
    kind = ""

    def __init__(self, target: str, check: ValueCheck | Matcher, navigator: GraphNavigator | None = None):
        self.target = target
        self.check = check
        self.navigator = navigator or GraphNavigator()

    def find(self, actual: Any) -> Any:
        raise NotImplementedError

    def matches(self, actual: Any) -> bool:
        value = self.find(actual)
        return value is not NOT_FOUND and _check(self.check, value)

    def describe(self) -> str:
        return f"has {self.kind} '{self.target}' which matches {_describe(self.check)}"

    def describe_mismatch(self, actual: Any) -> str:
        value = self.find(actual)
        if value is NOT_FOUND:
            return f"does not have {self.kind} '{self.target}'"
        if isinstance(self.check, Matcher):
            return f"{self.kind} '{self.target}' {self.check.describe_mismatch(value)}"
        return f"{self.kind} '{self.target}' was {value!r}, which does not match {_describe(self.check)}"

    def assert_matches(self, actual: Any) -> None:
        """Raise AssertionError describing the failure unless the graph matches."""
        assert_that(actual, self)


class HasProperty(_GraphLookupMatcher):
    """Matches if a property with the given name exists anywhere in the graph and its value matches.

    The first property found walking the graph depth first is tested.
    """

    kind = "property"

    def find(self, actual: Any) -> Any:
        return self.navigator.find_property(actual, self.target)


class HasPath(_GraphLookupMatcher):
    """Matches if the value at the given path exists and matches."""

    kind = "path"

    def find(self, actual: Any) -> Any:
        return self.navigator.find_path(actual, self.target)


def has_property(name: str, check: ValueCheck | Matcher) -> HasProperty:
    """Create a matcher testing a property found anywhere in the graph.

    Example:
        >>> assert_that(tree, has_property("name", lambda name: name == "Oak"))
    """
    return HasProperty(name, check)


def has_path(path: str, check: ValueCheck | Matcher) -> HasPath:
    """Create a matcher testing the value at a path.

    Example:
        >>> assert_that(tree, has_path("Tree.branches[0].dead", lambda dead: not dead))
    """
    return HasPath(path, check)


def assert_that(actual: Any, matcher: Matcher) -> None:
    """Raise AssertionError with the matcher's diagnostics unless it matches."""
    if not matcher.matches(actual):
        raise AssertionError(f"\nExpected: {matcher.describe()}\n     but: {matcher.describe_mismatch(actual)}")


__all__ = [
    "HasPath",
    "HasProperty",
    "Matcher",
    "TheSameAs",
    "assert_that",
    "has_path",
    "has_property",
    "the_same_as",
]
