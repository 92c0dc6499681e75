"""Comparison rule protocol and adaptation of plain callables."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from graph_matcher.core.exceptions import RuleConfigurationError


@runtime_checkable
class ComparisonRule(Protocol):
    """Protocol for rules deciding whether two values are equivalent.

    Rules registered on a path, a property name or a type replace the
    structural comparison of the whole subtree rooted at the matching node.
    """

    def matches(self, lhs: Any, rhs: Any) -> bool:
        """Return True if the actual value ``rhs`` is equivalent to the expected value ``lhs``."""
        ...


class Matches:
    """Rule passing when a single-value predicate holds for both values."""

    def __init__(self, predicate: Callable[[Any], bool]):
        self.predicate = predicate

    def matches(self, lhs: Any, rhs: Any) -> bool:
        return bool(self.predicate(lhs)) and bool(self.predicate(rhs))

    def __repr__(self) -> str:
        return f"Matches({self.predicate!r})"


class Satisfies:
    """Rule delegating to a two-argument boolean function."""

    def __init__(self, function: Callable[[Any, Any], bool]):
        self.function = function

    def matches(self, lhs: Any, rhs: Any) -> bool:
        return bool(self.function(lhs, rhs))

    def __repr__(self) -> str:
        return f"Satisfies({self.function!r})"


def _positional_arity(function: Callable[..., Any]) -> int:
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError) as exc:
        raise RuleConfigurationError(f"Cannot inspect signature of {function!r}") from exc

    required = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return 2
        if (
            parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
            and parameter.default is inspect.Parameter.empty
        ):
            required += 1
    return required


def as_rule(rule: ComparisonRule | Callable[..., Any]) -> ComparisonRule:
    """Adapt a rule, a two-argument function or a one-argument predicate.

    Args:
        rule: An object with a ``matches(lhs, rhs)`` method, a callable taking
            the expected and actual values, or a callable taking one value
            that must hold for both sides.

    Returns:
        A ComparisonRule.

    Raises:
        RuleConfigurationError: If the callable takes neither one nor two
            required positional arguments.
    """
    if isinstance(rule, ComparisonRule):
        return rule
    if not callable(rule):
        raise RuleConfigurationError(f"Expected a comparison rule or a callable, got {rule!r}")

    arity = _positional_arity(rule)
    if arity == 1:
        return Matches(rule)
    if arity == 2:
        return Satisfies(rule)
    raise RuleConfigurationError(
        f"Callable {rule!r} must take one value (predicate) or two values (expected, actual), takes {arity}"
    )


__all__ = [
    "ComparisonRule",
    "Matches",
    "Satisfies",
    "as_rule",
]
